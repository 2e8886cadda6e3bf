"""
Exception hierarchy for parcelstore.

All parcelstore exceptions inherit from ParcelStoreError, allowing callers to
catch every library-specific exception with a single except clause.

Exception Categories:
    - ParcelNotFoundError: No parcel has the requested number
    - StorageError: Database operation failed
    - ConfigError: Configuration could not be loaded

Design Principles:
    - All errors have error codes for programmatic handling
    - All errors include context (operation, number where applicable)
    - Driver exceptions are chained, never swallowed
"""

from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================

# Lookup errors: 4xxx
ERROR_PARCEL_NOT_FOUND = 4001

# Storage errors: 5xxx
ERROR_STORAGE_CONNECTION = 5001
ERROR_STORAGE_WRITE = 5002
ERROR_STORAGE_READ = 5003

# Configuration errors: 6xxx
ERROR_CONFIG_INVALID = 6001


# =============================================================================
# Base Exception
# =============================================================================


@dataclass
class ParcelStoreError(Exception):
    """
    Base exception for all parcelstore errors.

    Attributes:
        message: Human-readable error description
        code: Numeric error code for programmatic handling
        suggestion: Optional hint for how to resolve the error
        context: Optional dict with additional debugging info
    """

    message: str = ""
    code: int = 0
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        parts = [f"[E{self.code}] {self.message}"]
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def __repr__(self) -> str:
        """Format error for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
            "context": self.context,
        }


# =============================================================================
# Lookup Errors
# =============================================================================


@dataclass
class ParcelNotFoundError(ParcelStoreError):
    """
    Raised when no parcel row matches the requested number.

    Only reads raise this. Updates and deletes against a missing
    number succeed without effect.

    Attributes:
        number: The parcel number that was looked up
    """

    number: int = 0

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Parcel not found: {self.number}"
        if self.code == 0:
            self.code = ERROR_PARCEL_NOT_FOUND
        self.context["number"] = self.number


# =============================================================================
# Storage Errors
# =============================================================================


@dataclass
class StorageError(ParcelStoreError):
    """
    Base class for storage/database errors.

    Attributes:
        operation: The operation that failed (e.g., "add", "get_by_client")
    """

    operation: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        self.context["operation"] = self.operation


@dataclass
class StorageConnectionError(StorageError):
    """Raised when the database connection cannot be opened."""

    database: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Failed to connect to database: {self.database}"
        if self.code == 0:
            self.code = ERROR_STORAGE_CONNECTION
        if not self.suggestion:
            self.suggestion = "Check that the database path is valid and writable"
        super().__post_init__()
        self.context["database"] = self.database


@dataclass
class StorageWriteError(StorageError):
    """Raised when a write operation fails."""

    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Database write failed: {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_STORAGE_WRITE
        super().__post_init__()
        self.context["underlying_error"] = self.underlying_error


@dataclass
class StorageReadError(StorageError):
    """Raised when a read operation fails."""

    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Database read failed: {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_STORAGE_READ
        super().__post_init__()
        self.context["underlying_error"] = self.underlying_error


# =============================================================================
# Configuration Errors
# =============================================================================


@dataclass
class ConfigError(ParcelStoreError):
    """Raised when a store configuration is missing or invalid."""

    path: str | None = None
    validation_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            source = self.path or "<string>"
            self.message = f"Invalid configuration in {source}: {self.validation_error}"
        if self.code == 0:
            self.code = ERROR_CONFIG_INVALID
        self.context.update({
            "path": self.path,
            "validation_error": self.validation_error,
        })
