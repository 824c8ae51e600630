"""Connection manager and transaction helper tests."""
from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from display_prefs.config import get_store_config
from display_prefs.persistence.sqlite.engine import (
    ConnectionManager,
    StoreLocation,
    transaction,
)


def test_store_location_paths(tmp_path: Path) -> None:
    location = StoreLocation(tmp_path, "prefs.db")
    assert location.path == tmp_path / "prefs.db"  # nosec B101
    assert [p.name for p in location.related_paths()] == [  # nosec B101
        "prefs.db",
        "prefs.db-wal",
        "prefs.db-shm",
        "prefs.db-journal",
    ]


def test_acquire_creates_directory_and_applies_pragmas(connections: ConnectionManager) -> None:
    with connections.acquire() as conn:
        journal_mode = conn.execute("PRAGMA journal_mode").fetchone()[0]
        busy_timeout = conn.execute("PRAGMA busy_timeout").fetchone()[0]
        query_only = conn.execute("PRAGMA query_only").fetchone()[0]
    assert connections.db_path.parent.is_dir()  # nosec B101
    assert str(journal_mode).lower() == "wal"  # nosec B101
    assert busy_timeout == 5000  # nosec B101
    assert query_only == 0  # nosec B101


def test_read_only_connection_rejects_writes(connections: ConnectionManager) -> None:
    with connections.acquire() as conn:
        conn.execute("CREATE TABLE t (v TEXT)")
    with connections.acquire(read_only=True) as conn:
        assert conn.execute("PRAGMA query_only").fetchone()[0] == 1  # nosec B101
        with pytest.raises(sqlite3.Error):
            conn.execute("INSERT INTO t VALUES ('x')")


def test_connection_closed_on_error(connections: ConnectionManager) -> None:
    """The scope closes the connection even when the body raises."""
    captured = []
    with pytest.raises(RuntimeError):
        with connections.acquire() as conn:
            captured.append(conn)
            raise RuntimeError("boom")
    with pytest.raises(sqlite3.ProgrammingError):
        captured[0].execute("SELECT 1")


def test_write_lock_released_after_error(connections: ConnectionManager) -> None:
    with pytest.raises(RuntimeError):
        with connections.acquire():
            raise RuntimeError("boom")
    # A second write acquisition would block forever if the lock leaked.
    with connections.acquire() as conn:
        assert conn.execute("SELECT 1").fetchone()[0] == 1  # nosec B101


def test_transaction_commits_and_rolls_back(connections: ConnectionManager) -> None:
    with connections.acquire() as conn:
        conn.execute("CREATE TABLE t (v TEXT)")
        with transaction(conn):
            conn.execute("INSERT INTO t VALUES ('kept')")
        with pytest.raises(RuntimeError):
            with transaction(conn):
                conn.execute("INSERT INTO t VALUES ('dropped')")
                raise RuntimeError("force rollback")
        rows = [r[0] for r in conn.execute("SELECT v FROM t").fetchall()]
    assert rows == ["kept"]  # nosec B101


def test_from_config_uses_configured_location(tmp_path: Path) -> None:
    cfg = get_store_config({"data_dir": str(tmp_path), "busy_timeout_ms": 1234})
    manager = ConnectionManager.from_config(cfg)
    assert manager.db_path == tmp_path / "displaypreferences.db"  # nosec B101
    assert manager.busy_timeout_ms == 1234  # nosec B101
