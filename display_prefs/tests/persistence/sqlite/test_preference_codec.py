"""JSON preference codec tests."""
from __future__ import annotations

import json

import pytest

from display_prefs.base.dto import DisplayPreferences
from display_prefs.base.errors import ErrorCode, PreferenceCorruptionError
from display_prefs.persistence.sqlite import JsonPreferenceCodec


def test_encode_produces_utf8_json_with_extras():
    codec = JsonPreferenceCodec()
    data = codec.encode(DisplayPreferences(id="abc", client="web", theme="dunkel-ö"))
    payload = json.loads(data.decode("utf-8"))
    assert payload["id"] == "abc"  # nosec B101
    assert payload["theme"] == "dunkel-ö"  # nosec B101
    assert payload["primary_image_height"] == 250  # nosec B101


def test_decode_reverses_encode():
    codec = JsonPreferenceCodec()
    doc = DisplayPreferences(
        id="f" * 32,
        client="tv",
        view_type="Poster",
        index_by="Genre",
        remember_indexing=True,
        scroll_direction="Vertical",
        custom_prefs={"a": "1", "b": None},
        nested={"rows": [1, 2, 3]},
    )
    assert codec.decode(codec.encode(doc)) == doc  # nosec B101


def test_decode_accepts_text_rows():
    codec = JsonPreferenceCodec()
    out = codec.decode('{"id": "abc", "client": "web"}')
    assert out.id == "abc"  # nosec B101
    assert out.show_backdrop is True  # nosec B101


@pytest.mark.parametrize(
    "blob",
    [b"", b"not json", b"[1, 2]", b'{"sort_order": "Sideways"}', b"\xff\xfe\x00"],
)
def test_decode_failures_are_corruption(blob):
    with pytest.raises(PreferenceCorruptionError) as exc:
        JsonPreferenceCodec().decode(blob)
    assert exc.value.code is ErrorCode.CORRUPTION  # nosec B101
