"""Shared test fixtures for recordtime."""

import sqlite3

import pytest

from recordtime.config import settings
from recordtime.db import Store, apply_schema, init_db


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    apply_schema(db)

    yield db

    db.close()


@pytest.fixture
def store(test_db):
    """Autocommit Store on the in-memory test database."""
    return Store(test_db)


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    """Point settings.database_path at an initialized temp file database."""
    db_path = tmp_path / "data" / "recordtime.db"
    monkeypatch.setattr(settings, "database_path", str(db_path))
    init_db()
    return db_path
