"""Schema creation, idempotency and corruption recovery tests."""
from __future__ import annotations

import logging
import sqlite3
import uuid
from pathlib import Path
from typing import List

import pytest

from display_prefs.base.dto import DisplayPreferences
from display_prefs.base.errors import ErrorCode, StoreInitializationError, StoreNotReadyError
from display_prefs.persistence.file_system import LocalFileSystem
from display_prefs.persistence.sqlite import (
    DisplayPreferencesRepository,
    JsonPreferenceCodec,
    SchemaInitializer,
    StoreState,
)


class RecordingFileSystem(LocalFileSystem):
    def __init__(self) -> None:
        self.deleted: List[Path] = []

    def delete_file(self, path: Path) -> None:
        self.deleted.append(Path(path))
        super().delete_file(path)


class InertFileSystem:
    """Pretends to delete but leaves files in place."""

    def delete_file(self, path: Path) -> None:
        return None


def _corrupt(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"this is definitely not a sqlite database file\n" * 64)


def _schema_objects(db_path: Path) -> set:
    conn = sqlite3.connect(str(db_path))
    try:
        return {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type IN ('table', 'index')")
        }
    finally:
        conn.close()


def test_initialize_creates_table_and_index(connections):
    schema = SchemaInitializer(connections, LocalFileSystem())
    assert schema.state is StoreState.UNINITIALIZED  # nosec B101

    schema.initialize()

    assert schema.state is StoreState.READY  # nosec B101
    objects = _schema_objects(connections.db_path)
    assert {"userdisplaypreferences", "userdisplaypreferencesindex"} <= objects  # nosec B101


def test_unique_index_enforces_composite_key(connections):
    SchemaInitializer(connections, LocalFileSystem()).initialize()
    row = (b"\x01" * 16, b"\x02" * 16, "web", b"{}")
    with connections.acquire() as conn:
        conn.execute("INSERT INTO userdisplaypreferences VALUES (?, ?, ?, ?)", row)
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO userdisplaypreferences VALUES (?, ?, ?, ?)", row)


def test_initialize_twice_keeps_rows(repo, user_id):
    doc = DisplayPreferences(id=uuid.uuid4().hex, client="web", theme="dark")
    repo.save_display_preferences(doc, user_id, "web")

    repo.initialize()
    repo.initialize()

    assert repo.schema.state is StoreState.READY  # nosec B101
    assert repo.get_all_display_preferences(user_id) == [doc]  # nosec B101


def test_corrupted_file_is_reset_and_usable(connections, user_id, log_records):
    _corrupt(connections.db_path)
    file_system = RecordingFileSystem()
    repo = DisplayPreferencesRepository(connections, JsonPreferenceCodec(), file_system=file_system)

    repo.initialize()

    assert repo.schema.state is StoreState.READY  # nosec B101
    assert file_system.deleted == list(connections.location.related_paths())  # nosec B101
    assert repo.get_all_display_preferences(user_id) == []  # nosec B101

    doc = DisplayPreferences(id=uuid.uuid4().hex, client="web")
    repo.save_display_preferences(doc, user_id, "web")
    assert repo.get_display_preferences(doc.id, user_id, "web") == doc  # nosec B101

    resets = [r for r in log_records if '"event": "schema.init.reset"' in r.getMessage()]
    assert len(resets) == 1  # nosec B101
    assert resets[0].levelno == logging.ERROR  # nosec B101
    assert '"error_code": "corruption"' in resets[0].getMessage()  # nosec B101


def test_second_failure_is_fatal(connections, user_id):
    _corrupt(connections.db_path)
    repo = DisplayPreferencesRepository(
        connections, JsonPreferenceCodec(), file_system=InertFileSystem()
    )

    with pytest.raises(StoreInitializationError) as exc:
        repo.initialize()

    assert exc.value.code is ErrorCode.FATAL  # nosec B101
    assert exc.value.path == str(connections.db_path)  # nosec B101
    assert isinstance(exc.value.__cause__, sqlite3.DatabaseError)  # nosec B101
    assert repo.schema.state is StoreState.UNINITIALIZED  # nosec B101
    with pytest.raises(StoreNotReadyError):
        repo.get_all_display_preferences(user_id)
