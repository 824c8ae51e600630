"""SQLite connection management for the preference store.

Purpose
-------
Open short-lived, scoped connections to the single backing store file and
provide the write-transaction helper used by the repository.

External dependencies
---------------------
- Standard library only (``sqlite3``). No side effects at import time.

Concurrency strategy
--------------------
- WAL journaling lets read-only connections proceed while a writer holds the
  write lock.
- Read-write acquisitions on one ``ConnectionManager`` serialize on an
  in-process lock; SQLite's own locking (with ``busy_timeout``) serializes
  writers across processes.
- Read-only acquisitions set ``query_only`` and never take the lock.

Connections are opened per logical operation and always closed when the
``acquire`` scope ends, whether it exits normally or by exception.
"""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple

from ...config import StoreConfig
from ...config.defaults import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
    STORE_DB_FILE_NAME,
)

# Files SQLite may keep next to the database; removed together with it.
SIDECAR_SUFFIXES: Tuple[str, ...] = ("-wal", "-shm", "-journal")


@dataclass(frozen=True)
class StoreLocation:
    """Location of the single backing store file.

    Attributes
    ----------
    data_dir: Directory holding the file.
    file_name: File name inside ``data_dir``.
    """

    data_dir: Path
    file_name: str = STORE_DB_FILE_NAME

    @property
    def path(self) -> Path:
        return Path(self.data_dir).expanduser() / self.file_name

    def related_paths(self) -> Tuple[Path, ...]:
        """The database file followed by its journal sidecars."""
        base = self.path
        return (base,) + tuple(base.with_name(base.name + s) for s in SIDECAR_SUFFIXES)


class ConnectionManager:
    """Factory for scoped connections to one ``StoreLocation``.

    Constructed once and shared by reference with every component that
    touches the store.
    """

    def __init__(
        self,
        location: StoreLocation,
        *,
        busy_timeout_ms: int = SQLITE_BUSY_TIMEOUT_MS,
        journal_mode: str = SQLITE_JOURNAL_MODE,
        synchronous: str = SQLITE_SYNCHRONOUS,
    ) -> None:
        self.location = location
        self.busy_timeout_ms = busy_timeout_ms
        self.journal_mode = journal_mode
        self.synchronous = synchronous
        self._write_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: StoreConfig) -> "ConnectionManager":
        """Build a manager from resolved ``StoreConfig`` settings."""
        return cls(
            StoreLocation(config.data_dir, config.file_name),
            busy_timeout_ms=config.busy_timeout_ms,
            journal_mode=config.journal_mode,
            synchronous=config.synchronous,
        )

    @property
    def db_path(self) -> Path:
        return self.location.path

    def _open(self, read_only: bool) -> sqlite3.Connection:
        """Open a connection and apply PRAGMA settings.

        A file that is not a valid database fails here, on the first PRAGMA;
        the half-open connection is closed before the error propagates.
        """
        path = self.db_path
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(
            str(path),
            timeout=self.busy_timeout_ms / 1000,
            isolation_level=None,  # transactions are explicit, see ``transaction``
        )
        try:
            conn.execute(f"PRAGMA busy_timeout={int(self.busy_timeout_ms)};")  # ms
            conn.execute(f"PRAGMA journal_mode={self.journal_mode};")
            conn.execute(f"PRAGMA synchronous={self.synchronous};")
            if read_only:
                conn.execute("PRAGMA query_only=ON;")
        except BaseException:
            conn.close()
            raise
        return conn

    @contextmanager
    def acquire(self, read_only: bool = False) -> Iterator[sqlite3.Connection]:
        """Yield a connection that is closed when the scope ends.

        Parameters
        ----------
        read_only:
            When ``True`` the connection rejects writes and does not wait on
            in-process writers.
        """
        guard = nullcontext() if read_only else self._write_lock
        with guard:
            conn = self._open(read_only)
            try:
                yield conn
            finally:
                conn.close()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run the enclosed statements in one immediate write transaction.

    Transaction semantics
    ---------------------
    - ``BEGIN IMMEDIATE`` takes the database write lock up front.
    - Commits when the context exits normally.
    - Rolls back if any exception is raised inside the context, then re-raises.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        conn.rollback()
        raise
    conn.commit()


__all__ = [
    "StoreLocation",
    "ConnectionManager",
    "transaction",
    "SIDECAR_SUFFIXES",
]
