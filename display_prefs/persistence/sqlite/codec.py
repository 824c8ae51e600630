"""JSON codec between ``DisplayPreferences`` documents and stored blobs.

Documents are serialized with pydantic to UTF-8 JSON, extra fields included.
Blobs written as TEXT by older writers are accepted on decode. Anything that
does not parse into a valid document is reported as corruption rather than
replaced with an empty document.
"""

from __future__ import annotations

from typing import Union

from pydantic import ValidationError

from ...base.dto import DisplayPreferences
from ...base.errors import PreferenceCorruptionError


class JsonPreferenceCodec:
    """``IPreferenceCodec`` implementation backed by pydantic JSON."""

    def encode(self, document: DisplayPreferences) -> bytes:
        return document.model_dump_json().encode("utf-8")

    def decode(self, data: Union[bytes, str]) -> DisplayPreferences:
        """Parse a stored blob back into a document.

        Raises
        ------
        PreferenceCorruptionError
            If the blob is empty, not JSON, or fails model validation.
        """
        if not data:
            raise PreferenceCorruptionError("stored preferences blob is empty")
        try:
            return DisplayPreferences.model_validate_json(data)
        except ValidationError as exc:
            raise PreferenceCorruptionError(
                f"stored preferences blob could not be decoded: {exc.error_count()} error(s)",
                raw=exc,
            ) from exc


__all__ = ["JsonPreferenceCodec"]
