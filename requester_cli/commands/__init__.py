"""
CLI command modules.
"""

from requester_cli.commands import request

__all__ = ["request"]
