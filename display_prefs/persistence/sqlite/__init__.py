from __future__ import annotations

from typing import Any, Dict, Optional

from ...config import get_store_config
from ..file_system import LocalFileSystem
from ..interfaces.repos import IFileSystem, IPreferenceCodec
from .codec import JsonPreferenceCodec
from .db_schema import SchemaInitializer, StoreState
from .display_prefs_repo import DisplayPreferencesRepository
from .engine import ConnectionManager, StoreLocation, transaction


def get_repository(
    overrides: Optional[Dict[str, Any]] = None,
    *,
    codec: Optional[IPreferenceCodec] = None,
    file_system: Optional[IFileSystem] = None,
) -> DisplayPreferencesRepository:
    """Build and initialize a repository from merged store configuration."""
    connections = ConnectionManager.from_config(get_store_config(overrides))
    repo = DisplayPreferencesRepository(
        connections,
        codec or JsonPreferenceCodec(),
        file_system=file_system or LocalFileSystem(),
    )
    repo.initialize()
    return repo


__all__ = [
    "ConnectionManager",
    "StoreLocation",
    "transaction",
    "SchemaInitializer",
    "StoreState",
    "JsonPreferenceCodec",
    "DisplayPreferencesRepository",
    "get_repository",
]
