"""Shared fixtures for the preference store test suite.

Every test gets its own on-disk store under pytest's ``tmp_path`` so tests
never share a database file.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Iterator, List

import pytest

from display_prefs.base.logging import get_logger
from display_prefs.persistence.file_system import LocalFileSystem
from display_prefs.persistence.sqlite import (
    ConnectionManager,
    DisplayPreferencesRepository,
    JsonPreferenceCodec,
    StoreLocation,
)


class RecordingHandler(logging.Handler):
    """Collects emitted records for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def connections(tmp_path: Path) -> ConnectionManager:
    """Connection manager pointing at a fresh store file."""
    return ConnectionManager(StoreLocation(tmp_path / "data"))


@pytest.fixture()
def repo(connections: ConnectionManager) -> DisplayPreferencesRepository:
    """Initialized repository over the per-test store."""
    repository = DisplayPreferencesRepository(
        connections, JsonPreferenceCodec(), file_system=LocalFileSystem()
    )
    repository.initialize()
    return repository


@pytest.fixture()
def user_id() -> uuid.UUID:
    return uuid.UUID("7b2e61f5-3c0c-4a3e-9a1c-52b0c9a4d1e8")


@pytest.fixture()
def log_records() -> Iterator[List[logging.LogRecord]]:
    """Capture records reaching the shared store logger."""
    logger = get_logger()
    handler = RecordingHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
