"""
Body Encoding

Form-encodes POST bodies given as mappings. Pre-encoded strings and bytes
pass through untouched.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Union
from urllib.parse import quote, urlencode

Body = Union[str, bytes, Mapping[str, Any]]


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> Iterator[tuple[str, str]]:
    """Expand nested mappings and sequences into bracketed keys."""
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
    else:
        yield prefix, _scalar(value)


def encode_form(data: Mapping[str, Any]) -> str:
    """
    URL-form-encode a mapping.

    Pairs are joined with ``&`` in mapping order and percent-encoded per
    RFC 3986, so a space becomes ``%20``:

        >>> encode_form({"a": "1", "b": "two words"})
        'a=1&b=two%20words'

    Nested values use bracket keys (``tags[0]=x``, ``user[name]=y``) and
    ``None`` values are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        pairs.extend(_flatten(str(key), value))
    return urlencode(pairs, quote_via=quote)


def encode_body(data: Body) -> Union[str, bytes]:
    """Return the request body for ``data``."""
    if isinstance(data, (str, bytes)):
        return data
    if isinstance(data, Mapping):
        return encode_form(data)
    raise TypeError(
        f"POST data must be str, bytes or a mapping, got {type(data).__name__}"
    )
