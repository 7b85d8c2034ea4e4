"""
Pytest configuration and shared fixtures.

Every test that touches the store gets its own SQLite file under
``tmp_path`` so tests never share dogs.
"""
import sqlite3

import pytest
from fastapi.testclient import TestClient

from dog_tracker_api.app.core.config import settings
from dog_tracker_api.app.core.db import init_db
from dog_tracker_api.app.main import app
from dog_tracker_api.app.services import dog_service


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the store at a fresh database file and migrate it."""
    path = tmp_path / "dogs.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    """Test client bound to a fresh database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def other_client(db_path):
    """A second, independent client sharing the same database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_store(monkeypatch):
    """Make every service‑level connection attempt fail."""

    def _fail():
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(dog_service, "get_connection", _fail)



@pytest.fixture
def rex():
    """Request body for the dog used throughout the examples."""
    return {"firstname": "Rex", "lastname": "Dog", "breed": "Lab", "age": 3}
