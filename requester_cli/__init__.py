"""
Requester CLI

Command-line interface for the requester GET/POST helper.

Usage:
    python -m requester_cli get https://example.com
    python -m requester_cli post https://example.com/form -F a=1
    python -m requester_cli config --show
"""

__version__ = "0.1.0"
