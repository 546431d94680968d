"""
Transport

Executes one exchange described by an effective option set using
``requests`` and maps client-library failures onto transport error codes.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Any, Mapping, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.ssl_ import create_urllib3_context

from requester.schemas.errors import ErrorCodes, TransportError

from .options import (
    DEFAULT_CONNECT_TIMEOUT,
    RequestOption,
    VERIFY_HOST_OFF,
    parse_header_lines,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = requests.models.DEFAULT_REDIRECT_LIMIT

_DNS_MARKERS = (
    "NameResolutionError",
    "Name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "Temporary failure in name resolution",
    "No address associated with hostname",
    "Failed to resolve",
)

_EMPTY_REPLY_MARKERS = (
    "RemoteDisconnected",
    "without response",
)

_VERIFY_MARKERS = (
    "certificate verify failed",
    "hostname",
    "doesn't match",
)

# Raised while preparing the request, before anything is sent.
_ARGUMENT_ERRORS = (
    requests.exceptions.InvalidHeader,
    requests.exceptions.InvalidJSONError,
)


class _NoHostnameCheckAdapter(HTTPAdapter):
    """Verifies the peer certificate chain but not the host name."""

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        # Own context: urllib3 turns off check_hostname on whatever context it gets.
        context = create_urllib3_context()
        context.load_verify_locations(requests.certs.where())
        pool_kwargs["ssl_context"] = context
        pool_kwargs["assert_hostname"] = False
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


def transport_error_code(exc: requests.RequestException) -> int:
    """Map a requests exception to an ErrorCodes value."""
    text = str(exc)

    # SSLError, ProxyError and ConnectTimeout all subclass ConnectionError,
    # so the specific checks must come first.
    if isinstance(exc, requests.exceptions.SSLError):
        if any(marker in text.lower() for marker in _VERIFY_MARKERS):
            return ErrorCodes.PEER_FAILED_VERIFICATION
        return ErrorCodes.SSL_CONNECT_ERROR
    if isinstance(exc, requests.exceptions.ProxyError):
        return ErrorCodes.COULDNT_RESOLVE_PROXY
    if isinstance(exc, requests.exceptions.Timeout):
        return ErrorCodes.OPERATION_TIMEDOUT
    if isinstance(exc, requests.exceptions.TooManyRedirects):
        return ErrorCodes.TOO_MANY_REDIRECTS
    if isinstance(exc, requests.exceptions.InvalidSchema):
        return ErrorCodes.UNSUPPORTED_PROTOCOL
    if isinstance(exc, (
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidURL,
        requests.exceptions.URLRequired,
    )):
        return ErrorCodes.URL_MALFORMAT
    if isinstance(exc, requests.exceptions.ChunkedEncodingError):
        return ErrorCodes.PARTIAL_FILE
    if isinstance(exc, requests.exceptions.ContentDecodingError):
        return ErrorCodes.BAD_CONTENT_ENCODING
    if isinstance(exc, requests.exceptions.ConnectionError):
        if any(marker in text for marker in _DNS_MARKERS):
            return ErrorCodes.COULDNT_RESOLVE_HOST
        if any(marker in text for marker in _EMPTY_REPLY_MARKERS):
            return ErrorCodes.GOT_NOTHING
        return ErrorCodes.COULDNT_CONNECT
    return ErrorCodes.RECV_ERROR


def _verify_setting(options: Mapping[str, Any]) -> Union[bool, str]:
    if not options.get(RequestOption.SSL_VERIFY_PEER, True):
        return False
    ca_bundle = options.get(RequestOption.CA_BUNDLE)
    return ca_bundle if ca_bundle else True


def _timeout_setting(options: Mapping[str, Any]) -> tuple[Optional[float], Optional[float]]:
    return (
        options.get(RequestOption.CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT),
        options.get(RequestOption.TIMEOUT),
    )


def execute(options: Mapping[str, Any]) -> tuple[int, str]:
    """
    Perform a single exchange.

    Args:
        options: Effective option set (already merged, headers assigned)

    Returns:
        Tuple of (status_code, content)

    Raises:
        TransportError: If the exchange could not be completed
        ValueError: If requests rejects the arguments while preparing the
            request (header values with CR/LF, unserializable JSON)

    With peer verification off, urllib3 emits an InsecureRequestWarning for
    every request. It is left to the warnings filters of the calling
    application; changing filters here would touch process-wide state.
    """
    url = options.get(RequestOption.URL)
    if not isinstance(url, str) or not url:
        raise ValueError("url must be a non-empty string")

    method = str(options.get(RequestOption.METHOD, "GET")).upper()
    headers = parse_header_lines(options.get(RequestOption.HEADERS, []))
    verify = _verify_setting(options)
    proxy = options.get(RequestOption.PROXY)

    started = time.monotonic()
    with requests.Session() as session:
        session.max_redirects = options.get(RequestOption.MAX_REDIRECTS, DEFAULT_MAX_REDIRECTS)
        if verify and options.get(RequestOption.SSL_VERIFY_HOST) == VERIFY_HOST_OFF:
            session.mount("https://", _NoHostnameCheckAdapter())

        try:
            response = session.request(
                method=method,
                url=url,
                headers=headers,
                data=options.get(RequestOption.BODY),
                timeout=_timeout_setting(options),
                allow_redirects=bool(options.get(RequestOption.FOLLOW_REDIRECTS, True)),
                verify=verify,
                cert=options.get(RequestOption.CLIENT_CERT),
                proxies={"http": proxy, "https": proxy} if proxy else None,
            )
            content = response.text
        except _ARGUMENT_ERRORS as e:
            raise ValueError(f"invalid request: {e}") from e
        except requests.RequestException as e:
            code = transport_error_code(e)
            logger.warning("%s %s failed with transport error %d: %s", method, url, code, e)
            raise TransportError.from_code(
                code,
                method=method,
                url=url,
                reason=str(e),
            ) from e

    status_code = response.status_code or 0
    elapsed_ms = (time.monotonic() - started) * 1000
    logger.debug("%s %s -> %d (%.1f ms)", method, url, status_code, elapsed_ms)

    if not options.get(RequestOption.RETURN_TRANSFER, True):
        sys.stdout.write(content)
        content = ""

    return status_code, content
