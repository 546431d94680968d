"""
CLI Request Commands

Issue a GET or POST from the command line and print the response.

Usage:
    requester get https://example.com -H "Accept: text/plain"
    requester post https://example.com/form -F a=1 -F "b=two words"
    requester post https://example.com/raw --data '{"x": 1}' -H "Content-Type: application/json"
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict
from typing import Any

from requester.config import RuntimeConfig
from requester.http import HttpRequester, HttpResponse, RequestOption
from requester.schemas.errors import TransportError


logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_TRANSPORT_ERROR = 3


def parse_header_args(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``-H "Name: Value"`` arguments."""
    headers: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header (expected 'Name: Value'): {raw!r}")
        headers[name.strip()] = value.strip()
    return headers


def parse_field_args(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``-F key=value`` arguments."""
    fields: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid form field (expected 'key=value'): {raw!r}")
        fields[key] = value
    return fields


def build_options(args: Namespace, config: RuntimeConfig) -> dict[str, Any]:
    """Caller options from config, with command-line flags taking precedence."""
    options = config.http.to_request_options()
    if getattr(args, "connect_timeout", None) is not None:
        options[RequestOption.CONNECT_TIMEOUT] = args.connect_timeout
    if getattr(args, "timeout", None) is not None:
        options[RequestOption.TIMEOUT] = args.timeout
    if getattr(args, "follow", None) is not None:
        options[RequestOption.FOLLOW_REDIRECTS] = args.follow
    return options


def print_response(response: HttpResponse, as_json: bool) -> None:
    """Print a response in human-readable or JSON form."""
    if as_json:
        print(json.dumps(asdict(response), indent=2))
        return
    print(f"HTTP {response.status_code}", file=sys.stderr)
    sys.stdout.write(response.content)
    if response.content and not response.content.endswith("\n"):
        sys.stdout.write("\n")


def print_transport_error(error: TransportError, as_json: bool) -> None:
    """Print a transport failure in human-readable or JSON form."""
    if as_json:
        print(error.to_error_model().model_dump_json(indent=2))
        return
    print(f"Error [{error.code}]: {error.message}", file=sys.stderr)


def _run(args: Namespace, send) -> int:
    config: RuntimeConfig = args.runtime_config
    try:
        headers = parse_header_args(args.header)
        options = build_options(args, config)
        ssl_verify = config.http.ssl_verify and not args.insecure
        response = send(headers, options, ssl_verify)
    except TransportError as e:
        print_transport_error(e, args.json)
        return EXIT_TRANSPORT_ERROR
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print_response(response, args.json)
    return EXIT_SUCCESS


def get_cmd(args: Namespace) -> int:
    """Execute the get command."""
    logger.debug("GET %s", args.url)
    return _run(
        args,
        lambda headers, options, ssl_verify: HttpRequester.get(
            args.url, headers, options, ssl_verify
        ),
    )


def post_cmd(args: Namespace) -> int:
    """Execute the post command."""
    logger.debug("POST %s", args.url)

    def send(headers, options, ssl_verify):
        if args.field:
            data: Any = parse_field_args(args.field)
        else:
            data = args.data or ""
        return HttpRequester.post(args.url, data, headers, options, ssl_verify)

    return _run(args, send)
