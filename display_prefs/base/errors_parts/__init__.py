"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `display_prefs.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .store_error import (
    PreferenceCorruptionError,
    PreferenceValidationError,
    StoreError,
    StoreInitializationError,
    StoreNotReadyError,
)
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "StoreError",
    "PreferenceValidationError",
    "PreferenceCorruptionError",
    "StoreInitializationError",
    "StoreNotReadyError",
    "classify_exception",
]
