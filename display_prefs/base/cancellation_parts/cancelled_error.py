"""Cancellation error type.

Defines the public ``CancelledError`` raised when a write operation observes
a cancellation request before it starts any I/O.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Kept apart from :class:`~display_prefs.base.errors.StoreError` so callers
    can tell an abandoned request from a validation or storage failure.
    """

__all__ = ["CancelledError"]
