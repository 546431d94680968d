"""
Request Options

Option keys understood by HttpRequester, the built-in defaults for each
method, and the ordered merge that combines them with caller options.

Precedence rule: caller-supplied options override built-in defaults on any
key collision. The header list is not part of the merge; it is assigned
after merging and always wins.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class RequestOption:
    """Names of the options accepted in a request option mapping."""

    URL = "url"
    METHOD = "method"
    CONNECT_TIMEOUT = "connect_timeout"
    TIMEOUT = "timeout"
    FOLLOW_REDIRECTS = "follow_redirects"
    MAX_REDIRECTS = "max_redirects"
    SSL_VERIFY_PEER = "ssl_verify_peer"
    SSL_VERIFY_HOST = "ssl_verify_host"
    CA_BUNDLE = "ca_bundle"
    CLIENT_CERT = "client_cert"
    PROXY = "proxy"
    BODY = "body"
    RETURN_TRANSFER = "return_transfer"
    HEADERS = "headers"


KNOWN_OPTIONS = frozenset(
    value for name, value in vars(RequestOption).items() if name.isupper()
)

DEFAULT_CONNECT_TIMEOUT = 10

# 2 checks that the certificate matches the host name; 0 skips the check.
VERIFY_HOST_STRICT = 2
VERIFY_HOST_OFF = 0


def default_options(url: str, ssl_verify: bool = True) -> dict[str, Any]:
    """Built-in defaults shared by every method."""
    return {
        RequestOption.URL: url,
        RequestOption.RETURN_TRANSFER: True,
        RequestOption.CONNECT_TIMEOUT: DEFAULT_CONNECT_TIMEOUT,
        RequestOption.SSL_VERIFY_HOST: VERIFY_HOST_STRICT if ssl_verify else VERIFY_HOST_OFF,
        RequestOption.SSL_VERIFY_PEER: ssl_verify,
    }


def get_defaults(url: str, ssl_verify: bool = True) -> dict[str, Any]:
    """Defaults for a GET exchange."""
    defaults = default_options(url, ssl_verify)
    defaults[RequestOption.METHOD] = "GET"
    defaults[RequestOption.FOLLOW_REDIRECTS] = True
    return defaults


def post_defaults(url: str, body: Any, ssl_verify: bool = True) -> dict[str, Any]:
    """Defaults for a POST exchange; ``body`` must already be encoded."""
    defaults = default_options(url, ssl_verify)
    defaults[RequestOption.METHOD] = "POST"
    defaults[RequestOption.FOLLOW_REDIRECTS] = False
    defaults[RequestOption.BODY] = body
    return defaults


def validate_options(options: Mapping[str, Any]) -> None:
    """Reject option names the transport does not understand."""
    unknown = sorted(str(key) for key in options if key not in KNOWN_OPTIONS)
    if unknown:
        raise ValueError(f"Unknown request option(s): {', '.join(unknown)}")


def merge_options(
    options: Optional[Mapping[str, Any]],
    defaults: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Left-biased merge of caller options over defaults.

    Every key in ``options`` is kept as given; keys only present in
    ``defaults`` are filled in. Neither input is modified.

    Args:
        options: Caller-supplied options (may be None)
        defaults: Built-in defaults

    Returns:
        New dict holding the effective option set
    """
    merged = dict(defaults)
    if options:
        merged.update(options)
    return merged


def build_header_lines(headers: Optional[Mapping[str, Any]]) -> list[str]:
    """Serialize a header mapping into ``"Name: Value"`` lines."""
    if not headers:
        return []
    return [f"{name}: {value}" for name, value in headers.items()]


def parse_header_lines(lines: list[str]) -> dict[str, str]:
    """
    Turn ``"Name: Value"`` lines back into a mapping for the HTTP client.

    Lines without a colon are ignored. Header names are case-insensitive,
    so lines whose names differ only by case are sent as one header with
    the values comma-joined in line order (RFC 9110 field combination),
    keeping the spelling of the first line's name.
    """
    parsed: dict[str, str] = {}
    names: dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name, value = name.strip(), value.strip()
        key = names.setdefault(name.lower(), name)
        if key in parsed:
            parsed[key] = f"{parsed[key]}, {value}"
        else:
            parsed[key] = value
    return parsed
