"""128-bit identifier helpers for the preference key model.

Identifiers are ``uuid.UUID`` values. They render as 32-char lowercase hex
text and are stored as 16-byte blobs in the mixed-endian field layout
(``UUID.bytes_le``) so that existing store files stay readable.

Strings that are not already identifiers are hashed: MD5 over the UTF-16-LE
encoding of the text, interpreted with the same byte layout. The mapping is a
pure function of the input.
"""

from __future__ import annotations

import hashlib
import uuid
from typing import Union

from .errors import PreferenceValidationError

UserId = Union[uuid.UUID, str]


def hash_to_uuid(value: str) -> uuid.UUID:
    """Derive a deterministic identifier from arbitrary text."""
    digest = hashlib.md5(value.encode("utf-16-le"), usedforsecurity=False).digest()
    return uuid.UUID(bytes_le=digest)


def is_identifier(value: str) -> bool:
    """Whether ``value`` already parses as identifier text."""
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def resolve_id(value: str) -> uuid.UUID:
    """Return ``value`` as an identifier, hashing it when it is not one.

    Parameters
    ----------
    value:
        Identifier text in any standard form (hex, hyphenated, braced) or an
        arbitrary non-empty string.
    """
    try:
        return uuid.UUID(value)
    except ValueError:
        return hash_to_uuid(value)


def parse_user_id(value: UserId) -> uuid.UUID:
    """Coerce a user id given as ``UUID`` or identifier text.

    Raises
    ------
    PreferenceValidationError
        If ``value`` is neither a ``UUID`` nor parseable identifier text.
    """
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str) and value:
        try:
            return uuid.UUID(value)
        except ValueError as exc:
            raise PreferenceValidationError(
                f"user id is not a valid identifier: {value!r}", raw=exc
            ) from exc
    raise PreferenceValidationError(f"user id is not a valid identifier: {value!r}")


def to_blob(value: uuid.UUID) -> bytes:
    """Stored representation of an identifier."""
    return value.bytes_le


def to_text(value: uuid.UUID) -> str:
    """Canonical text representation of an identifier."""
    return value.hex


__all__ = [
    "UserId",
    "hash_to_uuid",
    "is_identifier",
    "resolve_id",
    "parse_user_id",
    "to_blob",
    "to_text",
]
