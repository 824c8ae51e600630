"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Store errors pass through; sqlite driver errors are split into corruption
(damaged or foreign file) and generic storage failures by message heuristics.
"""
from __future__ import annotations

import sqlite3
from typing import Optional

from ..cancellation_parts.cancelled_error import CancelledError
from .error_code import ErrorCode
from .store_error import StoreError

_CORRUPTION_PATTERNS = (
    "not a database",
    "malformed",
    "disk image",
    "file is encrypted",
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic for sqlite errors that signal a damaged file."""
    if any(p in msg for p in _CORRUPTION_PATTERNS):
        return ErrorCode.CORRUPTION
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. StoreError passthrough.
        2. Cooperative cancellation.
        3. sqlite errors (corruption heuristics, then ``STORAGE``).
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, StoreError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, sqlite3.Error):
        code = _heuristic_from_message(str(exc).lower())
        return code if code is not None else ErrorCode.STORAGE
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
