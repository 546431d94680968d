"""
Schemas Module

Error taxonomy shared by the requester library and CLI.
"""

from .errors import (
    ErrorCodes,
    RequesterException,
    TransportError,
    TransportErrorModel,
    describe,
)

__all__ = [
    "ErrorCodes",
    "RequesterException",
    "TransportError",
    "TransportErrorModel",
    "describe",
]
