"""
Schema definitions for parcelstore.

This module defines the Pydantic models used throughout parcelstore:
- Parcel: a tracked shipment record
- ParcelStatus: the status codes the application knows about
- StoreConfig: how to open the backing database

Design Decisions:
    - Parcel.status is an open string; ParcelStatus lists known values
      but the store layer never rejects other strings
    - created_at is kept as the RFC3339 text stored in the table
    - Models are immutable (frozen=True)
"""

from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from parcelstore.errors import ConfigError

# Go-style RFC3339 without fractional seconds, always UTC
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


# =============================================================================
# Enums
# =============================================================================


class ParcelStatus(str, Enum):
    """Known parcel lifecycle states."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


def now_rfc3339() -> str:
    """Get current UTC time as an RFC3339 string with second precision."""
    return datetime.now(UTC).strftime(TIMESTAMP_FORMAT)


# =============================================================================
# Parcel Model
# =============================================================================


class Parcel(BaseModel):
    """
    A tracked parcel.

    Attributes:
        number: Storage-assigned identifier (0 until the parcel is added)
        client: Owning client id
        status: Status code, usually a ParcelStatus value
        address: Delivery address
        created_at: RFC3339 creation timestamp
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    number: int = Field(
        default=0,
        description="Storage-assigned identifier (0 = not stored yet)",
        ge=0,
    )
    client: int = Field(..., description="Owning client id")
    status: str = Field(
        default=ParcelStatus.REGISTERED.value,
        description="Status code",
    )
    address: str = Field(default="", description="Delivery address")
    created_at: str = Field(
        default_factory=now_rfc3339,
        description="RFC3339 creation timestamp",
    )

    @field_validator("status", mode="before")
    @classmethod
    def unwrap_status(cls, v: Any) -> Any:
        """Store ParcelStatus members as their plain string value."""
        if isinstance(v, Enum):
            return v.value
        return v


# =============================================================================
# Configuration
# =============================================================================


class StoreConfig(BaseModel):
    """
    Settings for opening a parcel database.

    Attributes:
        database: SQLite file path, or ":memory:"
        timeout_seconds: How long SQLite waits on a locked database
        create_schema: Whether to create the parcel table on open
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database: str = Field(
        default=":memory:",
        description="SQLite file path or :memory:",
        min_length=1,
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="Busy timeout for a locked database",
        gt=0,
    )
    create_schema: bool = Field(
        default=True,
        description="Create the parcel table if it does not exist",
    )


def load_config(path: Path | str) -> StoreConfig:
    """
    Load a store configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated StoreConfig object

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    try:
        with path.open() as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(path=str(path), validation_error=str(e)) from e

    return _parse_config(content, str(path))


def load_config_from_string(content: str) -> StoreConfig:
    """Load a store configuration from a YAML string."""
    return _parse_config(content, None)


def _parse_config(content: str, source: str | None) -> StoreConfig:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(path=source, validation_error=str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            path=source,
            validation_error=f"expected a mapping, got {type(data).__name__}",
        )

    try:
        return StoreConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path=source, validation_error=str(e)) from e
