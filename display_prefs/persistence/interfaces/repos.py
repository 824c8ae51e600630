"""Repository, codec and file-system protocol definitions for the store.

Callers depend only on these abstractions; the concrete SQLite adapter lives
under `persistence/sqlite/`.

Design Principles:
- No concrete behavior; pure structural typing via `Protocol`.
- The document shape is the pydantic ``DisplayPreferences`` model; the codec
  is the only component that turns it into stored bytes and back.
- Transaction control belongs to the repository implementation; callers never
  see a connection.

Failure / Error Semantics:
- Validation failures raise ``PreferenceValidationError`` before any I/O.
- Undecodable stored blobs raise ``PreferenceCorruptionError``.
- Writes observing a cancelled token raise ``CancelledError`` before any I/O.
- Backend I/O errors propagate unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from ...base.cancellation import CancellationToken
from ...base.dto import DisplayPreferences
from ...base.identifiers import UserId


class IPreferenceCodec(Protocol):
    """Bidirectional document <-> bytes converter.

    ``decode(encode(doc)) == doc`` must hold for every document. ``decode``
    raises ``PreferenceCorruptionError`` for input it cannot interpret.
    """

    def encode(self, document: DisplayPreferences) -> bytes:
        ...

    def decode(self, data: bytes) -> DisplayPreferences:
        ...


class IFileSystem(Protocol):
    """Minimal file-system surface used for corruption recovery."""

    def delete_file(self, path: Path) -> None:
        """Remove ``path``; a missing file is not an error."""
        ...


class IDisplayPreferencesRepo(Protocol):
    """Per-user, per-client display preferences storage abstraction."""

    name: str

    def initialize(self) -> None:
        """Ensure the schema exists, resetting a damaged store once."""
        ...

    def save_display_preferences(
        self,
        display_preferences: DisplayPreferences,
        user_id: UserId,
        client: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Insert or fully replace the document stored under its key."""
        ...

    def save_all_display_preferences(
        self,
        display_preferences: Iterable[DisplayPreferences],
        user_id: UserId,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Upsert every document in one transaction (all or nothing)."""
        ...

    def get_display_preferences(
        self, display_preferences_id: str, user_id: UserId, client: str
    ) -> DisplayPreferences:
        """Return the stored document, or an empty one carrying the resolved id."""
        ...

    def get_all_display_preferences(self, user_id: UserId) -> List[DisplayPreferences]:
        """Return every document stored for ``user_id`` in no particular order."""
        ...
