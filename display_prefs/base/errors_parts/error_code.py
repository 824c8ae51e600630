"""
Normalized store error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the repository, schema
initializer and codec. Values are lowercase snake_case and are considered a
stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    CORRUPTION = "corruption"
    FATAL = "fatal"
    CANCELLED = "cancelled"
    NOT_READY = "not_ready"
    STORAGE = "storage"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
