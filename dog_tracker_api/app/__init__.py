"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Configuration, logging, storage and the tracked‑dog
cookie live in ``core``; persistence logic lives in ``services``;
request and response models live in ``schemas``; and the HTTP routes
(JSON endpoints and rendered pages) live in ``api/endpoints``.
"""

from .main import app  # noqa: F401
