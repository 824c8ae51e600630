"""Unified store error taxonomy public surface.

This module re-exports the implementations under
``display_prefs.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.store_error import (
    PreferenceCorruptionError,
    PreferenceValidationError,
    StoreError,
    StoreInitializationError,
    StoreNotReadyError,
)
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "StoreError",
    "PreferenceValidationError",
    "PreferenceCorruptionError",
    "StoreInitializationError",
    "StoreNotReadyError",
    "classify_exception",
]
