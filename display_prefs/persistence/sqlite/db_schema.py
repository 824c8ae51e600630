"""SQLite schema lifecycle for the preference store.

Purpose:
- Create the ``userdisplaypreferences`` table and its unique key index.
- Recover from an unreadable store file by deleting it and trying once more.

Lifecycle:
- ``StoreState.UNINITIALIZED`` until ``initialize`` succeeds, then ``READY``.
- A failed attempt drops back to ``UNINITIALIZED``; the store file and its
  journal sidecars are deleted (every record is lost) and creation is retried
  exactly once. A second failure raises ``StoreInitializationError``.
"""

from __future__ import annotations

import logging
import sqlite3
from enum import Enum
from typing import Optional

from ...base.errors import StoreInitializationError, classify_exception
from ...base.logging import LogContext, get_logger, log_event
from ..interfaces.repos import IFileSystem
from .engine import ConnectionManager

TABLE_NAME = "userdisplaypreferences"
INDEX_NAME = "userdisplaypreferencesindex"

SCHEMA_STATEMENTS = (
    f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} ("
    "id BLOB NOT NULL, "
    "userId BLOB NOT NULL, "
    "client TEXT NOT NULL, "
    "data BLOB NOT NULL)",
    f"CREATE UNIQUE INDEX IF NOT EXISTS {INDEX_NAME} ON {TABLE_NAME} (id, userId, client)",
)


class StoreState(str, Enum):
    """Schema lifecycle states."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the table and unique index if they do not exist."""
    for statement in SCHEMA_STATEMENTS:
        conn.execute(statement)


class SchemaInitializer:
    """Idempotent schema creation with one destructive recovery attempt."""

    def __init__(
        self,
        connections: ConnectionManager,
        file_system: IFileSystem,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.connections = connections
        self.file_system = file_system
        self.logger = logger or get_logger(__name__)
        self.state = StoreState.UNINITIALIZED

    @property
    def ready(self) -> bool:
        return self.state is StoreState.READY

    def initialize(self) -> None:
        """Ensure the schema exists, resetting the store once on failure.

        Raises
        ------
        StoreInitializationError
            If creation fails again after the store file was deleted.
        """
        ctx = LogContext(store_path=str(self.connections.db_path))
        try:
            self._create()
        except Exception as exc:
            self.state = StoreState.UNINITIALIZED
            log_event(
                self.logger,
                "schema.init.reset",
                ctx,
                level=logging.ERROR,
                exc_info=exc,
                error_code=classify_exception(exc).value,
                message="Error loading database file. Will reset and retry.",
            )
            self._delete_store()
            try:
                self._create()
            except Exception as retry_exc:
                log_event(
                    self.logger,
                    "schema.init.failed",
                    ctx,
                    level=logging.ERROR,
                    exc_info=retry_exc,
                    error_code=classify_exception(retry_exc).value,
                )
                raise StoreInitializationError(
                    "store schema could not be created after reset",
                    path=str(self.connections.db_path),
                    raw=retry_exc,
                ) from retry_exc
        self.state = StoreState.READY
        log_event(self.logger, "schema.init.ok", ctx)

    def _create(self) -> None:
        with self.connections.acquire() as conn:
            ensure_schema(conn)

    def _delete_store(self) -> None:
        for path in self.connections.location.related_paths():
            self.file_system.delete_file(path)


__all__ = [
    "TABLE_NAME",
    "INDEX_NAME",
    "SCHEMA_STATEMENTS",
    "StoreState",
    "SchemaInitializer",
    "ensure_schema",
]
