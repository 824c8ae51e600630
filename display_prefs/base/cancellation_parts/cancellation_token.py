"""Token a caller cancels to stop a pending preference write.

Writes poll the token once, before opening a connection. A transaction that
has already begun is never interrupted by a later ``cancel`` call.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """Set from any thread; checked by the repository ahead of write I/O."""

    def __init__(self) -> None:
        self._event = Event()
        self._reason: Optional[str] = None
        self._lock = Lock()

    def cancel(self, reason: Optional[str] = None) -> None:
        """Mark the token cancelled. A second call keeps the first reason."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled")


__all__ = ["CancellationToken"]
