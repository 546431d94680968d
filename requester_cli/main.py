"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m requester_cli get <url> [-H "Name: Value"]... [--insecure] [--json]
    python -m requester_cli post <url> [--data STR | -F key=value ...] [--json]
    python -m requester_cli config --init|--show [--path FILE]

Environment Variables:
    REQUESTER_CONNECT_TIMEOUT   Connect timeout in seconds (default: 10)
    REQUESTER_TIMEOUT           Read timeout in seconds (default: none)
    REQUESTER_FOLLOW_REDIRECTS  Follow redirects (true/false)
    REQUESTER_SSL_VERIFY        Verify TLS peer and host (default: true)
    REQUESTER_CA_BUNDLE         Path to a CA bundle
    REQUESTER_HTTP_PROXY        Proxy URL
    REQUESTER_LOG_LEVEL         Log level (default: INFO)
    REQUESTER_LOG_FILE          Also log to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from requester_cli import __version__
from requester_cli.commands import request
from requester_cli.config import (
    DEFAULT_CONFIG_NAME,
    get_default_config_template,
    load_config,
)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "url",
        type=str,
        help="Request URL",
    )
    parser.add_argument(
        "--header", "-H",
        action="append",
        default=None,
        help="Request header as 'Name: Value' (repeatable)",
    )
    parser.add_argument(
        "--insecure", "-k",
        action="store_true",
        default=False,
        help="Skip TLS peer and host verification",
    )
    parser.add_argument(
        "--connect-timeout",
        type=float,
        default=None,
        help="Connect timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Read timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--follow",
        dest="follow",
        action="store_true",
        default=None,
        help="Follow redirects",
    )
    parser.add_argument(
        "--no-follow",
        dest="follow",
        action="store_false",
        help="Do not follow redirects",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="requester",
        description="Issue HTTP GET/POST requests and print status and body.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: ./{DEFAULT_CONFIG_NAME} or ~/.config/requester/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser(
        "get",
        help="Issue a GET request",
        description="Send a GET request and print the response status and body.",
    )
    _add_request_arguments(get_parser)
    get_parser.set_defaults(func=request.get_cmd)

    # --- post command ---
    post_parser = subparsers.add_parser(
        "post",
        help="Issue a POST request",
        description="Send a POST request with a raw or form-encoded body.",
    )
    _add_request_arguments(post_parser)
    body_group = post_parser.add_mutually_exclusive_group()
    body_group.add_argument(
        "--data", "-d",
        type=str,
        default=None,
        help="Raw request body, sent verbatim",
    )
    body_group.add_argument(
        "--field", "-F",
        action="append",
        default=None,
        help="Form field as key=value, form-encoded into the body (repeatable)",
    )
    post_parser.set_defaults(func=request.post_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default=DEFAULT_CONFIG_NAME,
        help=f"Path for config file (default: {DEFAULT_CONFIG_NAME})",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (REQUESTER_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: requester config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_SUCCESS

    try:
        config = load_config(args.config)
    except (FileNotFoundError, json.JSONDecodeError, TypeError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(args.log_level or config.logging.level, config.logging.file)
    args.runtime_config = config

    return args.func(args)
