"""
Tests for POST body encoding.
"""

import pytest

from requester.http.encoding import encode_body, encode_form


pytestmark = pytest.mark.unit


def test_flat_mapping():
    assert encode_form({"a": "1", "b": "two words"}) == "a=1&b=two%20words"


def test_reserved_characters_are_percent_encoded():
    assert encode_form({"q": "a&b=c/d"}) == "q=a%26b%3Dc%2Fd"


def test_unicode_is_utf8_encoded():
    assert encode_form({"name": "café"}) == "name=caf%C3%A9"


def test_scalars():
    assert encode_form({"n": 5, "t": True, "f": False}) == "n=5&t=1&f=0"


def test_none_values_are_dropped():
    assert encode_form({"a": "1", "b": None}) == "a=1"


def test_nested_values_use_bracket_keys():
    encoded = encode_form({"tags": ["x", "y"], "user": {"name": "z"}})

    assert encoded == "tags%5B0%5D=x&tags%5B1%5D=y&user%5Bname%5D=z"


def test_empty_mapping():
    assert encode_form({}) == ""


def test_string_body_is_verbatim():
    body = "raw-body-string with spaces & symbols"

    assert encode_body(body) is body


def test_bytes_body_is_verbatim():
    assert encode_body(b"\x00\x01") == b"\x00\x01"


def test_unsupported_body_type():
    with pytest.raises(TypeError):
        encode_body(42)
