"""
Pytest configuration and fixtures for parcelstore tests.

This module provides shared fixtures used across unit and integration tests.
"""

import sqlite3
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest

from parcelstore.schema import Parcel, ParcelStatus
from parcelstore.store import ParcelStore, create_schema


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def conn() -> Generator[sqlite3.Connection, None, None]:
    """In-memory SQLite connection with the parcel table created."""
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


@pytest.fixture
def store(conn: sqlite3.Connection) -> ParcelStore:
    """ParcelStore over the in-memory connection."""
    return ParcelStore(conn)


@pytest.fixture
def make_parcel() -> Callable[..., Parcel]:
    """Factory for unsaved test parcels; keyword overrides replace fields."""

    def _make(**overrides) -> Parcel:
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": "2024-03-01T10:15:00Z",
        }
        fields.update(overrides)
        return Parcel(**fields)

    return _make


@pytest.fixture
def sample_config_yaml() -> str:
    """Return a simple store configuration YAML for testing."""
    return """
database: ":memory:"
timeout_seconds: 2.5
create_schema: true
"""
