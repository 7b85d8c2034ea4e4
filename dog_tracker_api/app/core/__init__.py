"""Core infrastructure: settings, logging, storage, templating and cookies."""
