from typing import Any, Optional

import pytest
from pydantic import BaseModel

from cookie_flash.codec import decode, encode
from cookie_flash.errors import DecodeError, EncodeError


class Notice(BaseModel):
    text: str
    count: int


def test_encode_wraps_value_in_compact_envelope():
    assert encode("This is the message", str) == '{"_":"This is the message"}'


def test_encode_escapes_non_ascii():
    raw = encode("Привет", str)
    assert raw.isascii()
    assert decode(raw, str) == "Привет"


@pytest.mark.parametrize(
    "value, type_",
    [
        ("text", str),
        (42, int),
        (True, bool),
        ([1, 2, 3], list[int]),
        ({"a": 1}, dict[str, int]),
        (None, Optional[str]),
        (Notice(text="saved", count=3), Notice),
        ({"free": ["form", 1]}, Any),
    ],
)
def test_round_trip(value, type_):
    assert decode(encode(value, type_), type_) == value


def test_encode_unserializable_value():
    with pytest.raises(EncodeError):
        encode(object())


@pytest.mark.parametrize(
    "raw",
    [
        "not-json",
        "",
        '{"wrong_key": 1}',
        '"just a string"',
        "[1, 2]",
        "null",
    ],
)
def test_decode_rejects_bad_shapes(raw):
    with pytest.raises(DecodeError):
        decode(raw, Any)


def test_decode_rejects_type_mismatch():
    with pytest.raises(DecodeError):
        decode('{"_": 5}', str)
    with pytest.raises(DecodeError):
        decode('{"_": "5"}', int)


def test_decode_ignores_extra_keys():
    assert decode('{"_": 1, "other": 2}', int) == 1


def test_decode_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode("{", str)


def test_encode_escapes_semicolon_but_stays_json():
    raw = encode("a;b,c", str)
    assert raw == '{"_":"a\\u003bb,c"}'
    assert ";" not in raw
    assert decode(raw, str) == "a;b,c"
