"""SQLite-backed implementation of ``IDisplayPreferencesRepo``.

Each document is stored under the composite key ``(id, userId, client)``
with its codec-encoded bytes in ``data``. Saves are upserts that replace the
whole row; there is no merge and no delete. Reads of a missing key return an
empty document carrying the resolved identifier instead of signalling
"not found".

Connections are acquired per call: writes take a read-write connection and an
immediate transaction, reads take a read-only connection. Input is validated
and the cancellation token is checked before any connection is opened.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from typing import Iterable, List, Optional

from ...base.cancellation import CancellationToken
from ...base.dto import DisplayPreferences
from ...base.errors import PreferenceValidationError, StoreNotReadyError
from ...base.identifiers import (
    UserId,
    is_identifier,
    parse_user_id,
    resolve_id,
    to_blob,
    to_text,
)
from ...base.logging import LogContext, get_logger, log_event
from ..file_system import LocalFileSystem
from ..interfaces.repos import IFileSystem, IPreferenceCodec
from .db_schema import TABLE_NAME, SchemaInitializer
from .engine import ConnectionManager, transaction

_UPSERT_SQL = (
    f"REPLACE INTO {TABLE_NAME} (id, userId, client, data) "
    "VALUES (:id, :userId, :client, :data)"
)
_SELECT_ONE_SQL = (
    f"SELECT data FROM {TABLE_NAME} WHERE id = :id AND userId = :userId AND client = :client"
)
_SELECT_BY_USER_SQL = f"SELECT data FROM {TABLE_NAME} WHERE userId = :userId"


class DisplayPreferencesRepository:
    """SQLite repository for per-user, per-client display preferences.

    Parameters
    ----------
    connections:
        Shared connection manager for the backing file.
    codec:
        Document <-> bytes converter.
    schema:
        Schema initializer; built from ``connections`` and ``file_system``
        when omitted.
    file_system:
        Used by the default schema initializer to delete a damaged store.
    logger:
        Optional logger; defaults to a child of the shared store logger.
    """

    name = "SQLite"

    def __init__(
        self,
        connections: ConnectionManager,
        codec: IPreferenceCodec,
        *,
        schema: Optional[SchemaInitializer] = None,
        file_system: Optional[IFileSystem] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.connections = connections
        self.codec = codec
        self.logger = logger or get_logger(__name__)
        self.schema = schema or SchemaInitializer(
            connections, file_system or LocalFileSystem(), logger=self.logger
        )

    def initialize(self) -> None:
        """Create the schema, resetting a damaged store file once."""
        self.schema.initialize()

    # ---------- writes ----------

    def save_display_preferences(
        self,
        display_preferences: DisplayPreferences,
        user_id: UserId,
        client: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Insert or fully replace one document.

        Raises
        ------
        PreferenceValidationError
            If the document is ``None``, its id or ``client`` is empty, or
            ``user_id`` is not an identifier.
        CancelledError
            If ``cancellation_token`` was cancelled before the write started.
        """
        _validate_document(display_preferences)
        if not client:
            raise PreferenceValidationError("client is required")
        user_uuid = parse_user_id(user_id)
        if cancellation_token is not None:
            cancellation_token.raise_if_cancelled()
        self._ensure_ready()

        with self.connections.acquire() as conn:
            with transaction(conn):
                self._upsert(conn, display_preferences, user_uuid, client)

        log_event(
            self.logger,
            "prefs.save",
            LogContext(user_id=to_text(user_uuid), client=client),
            level=logging.DEBUG,
        )

    def save_all_display_preferences(
        self,
        display_preferences: Iterable[DisplayPreferences],
        user_id: UserId,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Upsert a batch of documents in a single transaction.

        Every document is validated before the store is touched, so an invalid
        entry anywhere in the batch persists nothing. Each document's own
        ``client`` is used as part of its key.
        """
        if display_preferences is None:
            raise PreferenceValidationError("display preferences collection is required")
        documents = list(display_preferences)
        for document in documents:
            _validate_document(document)
            if not document.client:
                raise PreferenceValidationError(
                    f"display preferences {document.id!r} has no client"
                )
        user_uuid = parse_user_id(user_id)
        if cancellation_token is not None:
            cancellation_token.raise_if_cancelled()
        self._ensure_ready()

        with self.connections.acquire() as conn:
            with transaction(conn):
                for document in documents:
                    self._upsert(conn, document, user_uuid, document.client)

        log_event(
            self.logger,
            "prefs.save_batch",
            LogContext(user_id=to_text(user_uuid)),
            level=logging.DEBUG,
            count=len(documents),
        )

    def _upsert(
        self,
        conn: sqlite3.Connection,
        document: DisplayPreferences,
        user_uuid: uuid.UUID,
        client: str,
    ) -> None:
        item_id = resolve_id(document.id)
        # identifier text is kept as written; only hashed ids are replaced
        stored = document
        if not is_identifier(document.id):
            stored = document.model_copy(update={"id": to_text(item_id)})
        conn.execute(
            _UPSERT_SQL,
            {
                "id": to_blob(item_id),
                "userId": to_blob(user_uuid),
                "client": client,
                "data": self.codec.encode(stored),
            },
        )

    # ---------- reads ----------

    def get_display_preferences(
        self, display_preferences_id: str, user_id: UserId, client: str
    ) -> DisplayPreferences:
        """Return the document stored under the key, or an empty one.

        ``display_preferences_id`` is resolved to an identifier (hashed when it
        is not one already). On a miss the returned document's ``id`` is the
        resolved identifier text and ``client`` is the requested client.
        """
        if not display_preferences_id:
            raise PreferenceValidationError("display preferences id is required")
        item_id = resolve_id(display_preferences_id)
        user_uuid = parse_user_id(user_id)
        self._ensure_ready()

        with self.connections.acquire(read_only=True) as conn:
            row = conn.execute(
                _SELECT_ONE_SQL,
                {"id": to_blob(item_id), "userId": to_blob(user_uuid), "client": client},
            ).fetchone()

        if row is not None:
            return self.codec.decode(row[0])

        log_event(
            self.logger,
            "prefs.get.miss",
            LogContext(user_id=to_text(user_uuid), client=client),
            level=logging.DEBUG,
            id=to_text(item_id),
        )
        return DisplayPreferences(id=to_text(item_id), client=client)

    def get_all_display_preferences(self, user_id: UserId) -> List[DisplayPreferences]:
        """Return every document stored for ``user_id`` (any id, any client)."""
        user_uuid = parse_user_id(user_id)
        self._ensure_ready()

        with self.connections.acquire(read_only=True) as conn:
            rows = conn.execute(_SELECT_BY_USER_SQL, {"userId": to_blob(user_uuid)}).fetchall()

        return [self.codec.decode(row[0]) for row in rows]

    def _ensure_ready(self) -> None:
        if not self.schema.ready:
            raise StoreNotReadyError(
                "store schema is not initialized", path=str(self.connections.db_path)
            )


def _validate_document(document: Optional[DisplayPreferences]) -> None:
    if document is None:
        raise PreferenceValidationError("display preferences document is required")
    if not document.id:
        raise PreferenceValidationError("display preferences has an invalid id")


__all__ = ["DisplayPreferencesRepository"]
