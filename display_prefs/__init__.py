"""display_prefs package

Durable per-user, per-client store for small UI display-preference documents
backed by a single SQLite file.

Public API (re-exported):
    - Version: ``__version__``
    - Document model: :class:`DisplayPreferences`
    - Repository: :class:`DisplayPreferencesRepository`, :func:`get_repository`
    - Errors: :class:`StoreError` and subclasses, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.dto import DisplayPreferences
from .base.errors import (
    ErrorCode,
    PreferenceCorruptionError,
    PreferenceValidationError,
    StoreError,
    StoreInitializationError,
    StoreNotReadyError,
)
from .persistence.sqlite import DisplayPreferencesRepository, get_repository

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DisplayPreferences",
    "DisplayPreferencesRepository",
    "get_repository",
    "ErrorCode",
    "StoreError",
    "PreferenceValidationError",
    "PreferenceCorruptionError",
    "StoreInitializationError",
    "StoreNotReadyError",
    "CancellationToken",
    "CancelledError",
]
