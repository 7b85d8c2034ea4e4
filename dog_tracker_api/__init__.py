"""
Top‑level package for the Dog Tracker API.

This file makes ``dog_tracker_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``dog_tracker_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
