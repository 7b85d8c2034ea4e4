"""
Tests for settings resolution, migrations and logging setup.
"""
import logging
import os
import sqlite3

from dog_tracker_api.app.core import db
from dog_tracker_api.app.core.config import settings
from dog_tracker_api.app.core.logging_config import setup_logging


class TestDatabasePath:
    def test_absolute_path_is_used_as_is(self, tmp_path, monkeypatch):
        target = str(tmp_path / "abs.db")
        monkeypatch.setattr(settings, "database_url", target)

        assert db.get_database_path() == target

    def test_relative_path_resolves_against_project_root(self, monkeypatch):
        monkeypatch.setattr(settings, "database_url", "relative.db")

        path = db.get_database_path()

        assert os.path.isabs(path)
        assert path.endswith(os.path.join("dog_tracker_api", "relative.db"))


class TestMigrations:
    def test_init_db_creates_dogs_table(self, db_path):
        conn = sqlite3.connect(db_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
        finally:
            conn.close()

        assert {"dogs", "migrations"} <= tables

    def test_init_db_is_idempotent(self, db_path):
        assert db.init_db() == 1
        assert db.init_db() == 1


class TestLogging:
    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        before = len(logging.getLogger().handlers)

        setup_logging("INFO")

        assert len(logging.getLogger().handlers) == before

    def test_level_is_applied(self):
        root = logging.getLogger()
        original = root.level
        try:
            assert setup_logging("debug") == logging.DEBUG
            assert root.level == logging.DEBUG
            assert setup_logging("nonsense") == logging.INFO
        finally:
            root.setLevel(original)
