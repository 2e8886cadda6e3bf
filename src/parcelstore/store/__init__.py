"""
Storage module for parcelstore.

This module provides SQLite-based persistence for parcel records.

Tables:
    - parcel: one row per parcel (number, client, status, address, created_at)

Design principles:
    - Borrowed connection: ParcelStore works on a connection it does not own
    - Owned connection: ParcelDB opens, prepares and closes one for you
    - Updates and deletes on a missing number are silent no-ops
"""

from parcelstore.store.db import CREATE_TABLE_SQL, ParcelDB, ParcelStore, create_schema

__all__ = [
    "CREATE_TABLE_SQL",
    "ParcelDB",
    "ParcelStore",
    "create_schema",
]
