"""Cooperative cancellation primitives (public API facade).

Notes
-----
- ``CancellationToken`` lets a caller abandon a pending save before it
  touches the store.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
