"""
SQLite storage for parcels.

This module provides persistence for Parcel records in a single table.

Components:
    - ParcelStore: data-access object over a caller-owned connection
    - ParcelDB: opens and owns a connection, exposes a ParcelStore
    - create_schema: creates the parcel table on any connection

Design Principles:
    - One statement per operation, committed immediately
    - The store never opens or closes the connection it is given
    - Updates and deletes that match no row are not errors
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from parcelstore.errors import (
    ParcelNotFoundError,
    StorageConnectionError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from parcelstore.schema import Parcel, ParcelStatus, StoreConfig

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS parcel (
    number INTEGER PRIMARY KEY AUTOINCREMENT,
    client INTEGER,
    status TEXT,
    address TEXT,
    created_at TEXT
);

CREATE INDEX IF NOT EXISTS idx_parcel_client ON parcel(client);
"""

SELECT_COLUMNS = "number, client, status, address, created_at"

# Driver errors, plus ints outside SQLite's 64-bit INTEGER range
DRIVER_ERRORS = (sqlite3.Error, OverflowError)


def create_schema(conn: sqlite3.Connection) -> None:
    """
    Create the parcel table if it does not exist.

    Raises:
        StorageWriteError: If the DDL fails
    """
    try:
        cursor = conn.executescript(CREATE_TABLE_SQL)
        cursor.close()
        conn.commit()
    except sqlite3.Error as e:
        raise StorageWriteError(
            operation="create_schema",
            underlying_error=str(e),
        ) from e


def _row_to_parcel(row: Any) -> Parcel:
    # Works for sqlite3.Row and plain tuples alike
    number, client, status, address, created_at = tuple(row)
    return Parcel(
        number=number,
        client=client,
        status=status,
        address=address,
        created_at=created_at,
    )


class ParcelStore:
    """
    Data-access object for parcel records.

    The connection is borrowed: the store holds a reference and
    never closes it.

    Usage:
        store = ParcelStore(conn)
        number = store.add(Parcel(client=1000, address="test"))
        parcel = store.get(number)
        store.set_status(number, ParcelStatus.SENT)
        store.delete(number)
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return its storage-assigned number.

        parcel.number is ignored.

        Raises:
            StorageWriteError: If the insert fails
        """
        try:
            cursor = self._conn.execute(
                """
                INSERT INTO parcel (client, status, address, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (parcel.client, parcel.status, parcel.address, parcel.created_at),
            )
            self._conn.commit()
        except DRIVER_ERRORS as e:
            raise StorageWriteError(
                operation="add",
                underlying_error=str(e),
            ) from e

        number = cursor.lastrowid
        logger.debug("added parcel %s for client %s", number, parcel.client)
        return number

    def get(self, number: int) -> Parcel:
        """
        Get a parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
            StorageReadError: If the query fails or the row cannot be read
        """
        try:
            cursor = self._conn.execute(
                f"SELECT {SELECT_COLUMNS} FROM parcel WHERE number = ?",
                (number,),
            )
            row = cursor.fetchone()
            if row is None:
                raise ParcelNotFoundError(number=number)
            return _row_to_parcel(row)
        except (*DRIVER_ERRORS, ValidationError) as e:
            raise StorageReadError(
                operation="get",
                underlying_error=str(e),
            ) from e

    def get_by_client(self, client: int) -> list[Parcel]:
        """
        Get every parcel belonging to a client.

        Order is not guaranteed. Returns an empty list if the client
        has no parcels.

        Raises:
            StorageReadError: If the query fails
        """
        try:
            cursor = self._conn.execute(
                f"SELECT {SELECT_COLUMNS} FROM parcel WHERE client = ?",
                (client,),
            )
            return [_row_to_parcel(row) for row in cursor]
        except (*DRIVER_ERRORS, ValidationError) as e:
            raise StorageReadError(
                operation="get_by_client",
                underlying_error=str(e),
            ) from e

    def set_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a parcel.

        A number that matches no parcel is not an error.

        Raises:
            StorageWriteError: If the update fails
        """
        self._execute_write(
            "set_address",
            "UPDATE parcel SET address = ? WHERE number = ?",
            (address, number),
            number,
        )

    def set_status(self, number: int, status: ParcelStatus | str) -> None:
        """
        Change the status of a parcel.

        The value is stored as given; callers are expected to pass one
        of the ParcelStatus constants. A number that matches no parcel
        is not an error.

        Raises:
            StorageWriteError: If the update fails
        """
        if isinstance(status, ParcelStatus):
            status = status.value
        self._execute_write(
            "set_status",
            "UPDATE parcel SET status = ? WHERE number = ?",
            (status, number),
            number,
        )

    def delete(self, number: int) -> None:
        """
        Permanently remove a parcel.

        A number that matches no parcel is not an error.

        Raises:
            StorageWriteError: If the delete fails
        """
        self._execute_write(
            "delete",
            "DELETE FROM parcel WHERE number = ?",
            (number,),
            number,
        )

    def _execute_write(
        self,
        operation: str,
        sql: str,
        params: tuple[Any, ...],
        number: int,
    ) -> None:
        try:
            cursor = self._conn.execute(sql, params)
            self._conn.commit()
        except DRIVER_ERRORS as e:
            raise StorageWriteError(
                operation=operation,
                underlying_error=str(e),
            ) from e

        # Affected-row count is informational only
        if cursor.rowcount == 0:
            logger.debug("%s matched no parcel with number %s", operation, number)
        else:
            logger.debug("%s updated parcel %s", operation, number)


class ParcelDB:
    """
    SQLite database holding the parcel table.

    Owns its connection, unlike ParcelStore.

    Usage:
        with ParcelDB("parcels.db") as db:
            number = db.store.add(parcel)

    Or from configuration:
        with ParcelDB.from_config(load_config("parcelstore.yaml")) as db:
            ...
    """

    def __init__(
        self,
        database: str | Path = ":memory:",
        timeout_seconds: float = 5.0,
        create_schema: bool = True,
    ) -> None:
        """
        Open the database.

        Args:
            database: Path to the SQLite file or ":memory:".
                      A missing file will be created.
            timeout_seconds: Busy timeout for a locked database
            create_schema: Create the parcel table if needed
        """
        self.database = str(database)
        self.timeout_seconds = timeout_seconds
        self._conn: sqlite3.Connection | None = None
        self._store: ParcelStore | None = None
        self._connect()
        if create_schema:
            try:
                self.init_schema()
            except StorageError:
                self.close()
                raise

    @classmethod
    def from_config(cls, config: StoreConfig) -> "ParcelDB":
        """Open a database described by a StoreConfig."""
        return cls(
            database=config.database,
            timeout_seconds=config.timeout_seconds,
            create_schema=config.create_schema,
        )

    def _connect(self) -> None:
        """Establish database connection."""
        try:
            self._conn = sqlite3.connect(
                self.database,
                timeout=self.timeout_seconds,
                check_same_thread=False,
            )
            self._conn.row_factory = sqlite3.Row
        except sqlite3.Error as e:
            raise StorageConnectionError(
                database=self.database,
                operation="connect",
                message=f"Failed to connect to database: {e}",
            ) from e
        self._store = ParcelStore(self._conn)
        logger.debug("opened parcel database %s", self.database)

    def init_schema(self) -> None:
        """Create the parcel table if it does not exist."""
        create_schema(self.connection)

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection."""
        if self._conn is None:
            raise StorageConnectionError(
                database=self.database,
                operation="connection",
                message=f"Database is closed: {self.database}",
            )
        return self._conn

    @property
    def store(self) -> ParcelStore:
        """The ParcelStore bound to this database's connection."""
        if self._store is None:
            raise StorageConnectionError(
                database=self.database,
                operation="store",
                message=f"Database is closed: {self.database}",
            )
        return self._store

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            self._store = None

    def __enter__(self) -> "ParcelDB":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager."""
        self.close()
