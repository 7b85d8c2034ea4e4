"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a real deployment you
should at least override ``SECRET_KEY`` and ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Dog Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Key used to sign the tracked‑dog cookie.  Changing it invalidates
    # every cookie already handed out, which simply resets each client
    # back to the placeholder dog.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")

    tracking_cookie_name: str = os.getenv("TRACKING_COOKIE_NAME", "tracked_dog")
    tracking_cookie_max_age: int = int(os.getenv("TRACKING_COOKIE_MAX_AGE", str(60 * 60 * 24)))

    # Path to the SQLite database.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "dog_tracker.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
