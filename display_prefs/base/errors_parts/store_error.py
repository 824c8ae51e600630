"""
Structured store error exception types.

`StoreError` carries a normalized `ErrorCode` plus the backing file path and
the original exception (when one exists). The subclasses fix the code for the
categories callers commonly need to catch individually.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class StoreError(Exception):
    """Represents a structured store error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        path: Backing store file involved, when known.
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    path: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code and message."""
        return f"{self.code.value}: {self.message}"


@dataclass
class PreferenceValidationError(StoreError):
    """Raised before any I/O when caller input is absent or malformed."""

    code: ErrorCode = ErrorCode.VALIDATION


@dataclass
class PreferenceCorruptionError(StoreError):
    """Raised when a stored blob cannot be decoded back into a document."""

    code: ErrorCode = ErrorCode.CORRUPTION


@dataclass
class StoreInitializationError(StoreError):
    """Raised when schema creation fails even after the reset-and-retry."""

    code: ErrorCode = ErrorCode.FATAL


@dataclass
class StoreNotReadyError(StoreError):
    """Raised when an operation runs before the schema was initialized."""

    code: ErrorCode = ErrorCode.NOT_READY


__all__ = [
    "StoreError",
    "PreferenceValidationError",
    "PreferenceCorruptionError",
    "StoreInitializationError",
    "StoreNotReadyError",
]
