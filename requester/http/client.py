"""
HTTP Requester

Static GET/POST helper with a uniform response shape.

Each call builds an effective option set (caller options over built-in
defaults, header list assigned last), runs exactly one exchange on its own
session and returns an HttpResponse. Transport failures raise TransportError;
HTTP error statuses come back as ordinary responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .encoding import Body, encode_body
from .options import (
    RequestOption,
    build_header_lines,
    get_defaults,
    merge_options,
    post_defaults,
    validate_options,
)
from .transport import execute


@dataclass(frozen=True)
class HttpResponse:
    """
    Result of a completed exchange.
    """
    status_code: int
    content: str

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300


def _effective_options(
    options: Optional[Mapping[str, Any]],
    defaults: Mapping[str, Any],
    headers: Optional[Mapping[str, Any]],
) -> dict[str, Any]:
    if options:
        validate_options(options)
    effective = merge_options(options, defaults)
    # Assigned after the merge so caller options can never replace it.
    effective[RequestOption.HEADERS] = build_header_lines(headers)
    return effective


def _require_url(url: str) -> None:
    if not isinstance(url, str) or not url:
        raise ValueError("url must be a non-empty string")


class HttpRequester:
    """
    Stateless GET/POST helper.

    Usage:
        response = HttpRequester.get("https://api.example.com/data")
        if response.ok:
            print(response.content)

        response = HttpRequester.post(
            "https://api.example.com/form",
            {"a": "1", "b": "two words"},
            headers={"X-Token": "abc"},
            options={RequestOption.CONNECT_TIMEOUT: 2},
        )
    """

    @staticmethod
    def get(
        url: str,
        headers: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        ssl_verify: bool = True,
    ) -> HttpResponse:
        """
        Execute a GET request.

        Args:
            url: Request URL
            headers: Headers to send, name to value
            options: RequestOption overrides; these win over the defaults
            ssl_verify: Verify the peer certificate and host name

        Returns:
            HttpResponse with status code and body

        Raises:
            TransportError: If the exchange could not be completed
        """
        _require_url(url)
        effective = _effective_options(options, get_defaults(url, ssl_verify), headers)
        status_code, content = execute(effective)
        return HttpResponse(status_code=status_code, content=content)

    @staticmethod
    def post(
        url: str,
        data: Body,
        headers: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        ssl_verify: bool = True,
    ) -> HttpResponse:
        """
        Execute a POST request.

        Args:
            url: Request URL
            data: Pre-encoded body string, or a mapping to form-encode
            headers: Headers to send, name to value
            options: RequestOption overrides; these win over the defaults
            ssl_verify: Verify the peer certificate and host name

        Returns:
            HttpResponse with status code and body

        Raises:
            TransportError: If the exchange could not be completed
        """
        _require_url(url)
        defaults = post_defaults(url, encode_body(data), ssl_verify)
        effective = _effective_options(options, defaults, headers)
        status_code, content = execute(effective)
        return HttpResponse(status_code=status_code, content=content)


def get(
    url: str,
    headers: Optional[Mapping[str, Any]] = None,
    options: Optional[Mapping[str, Any]] = None,
    ssl_verify: bool = True,
) -> HttpResponse:
    """Make a GET request."""
    return HttpRequester.get(url, headers, options, ssl_verify)


def post(
    url: str,
    data: Body,
    headers: Optional[Mapping[str, Any]] = None,
    options: Optional[Mapping[str, Any]] = None,
    ssl_verify: bool = True,
) -> HttpResponse:
    """Make a POST request."""
    return HttpRequester.post(url, data, headers, options, ssl_verify)
