"""
Requester

Static HTTP GET/POST helper with configurable headers, request options
and TLS verification.
"""

from requester.http import HttpRequester, HttpResponse, RequestOption, get, post
from requester.schemas import TransportError

__version__ = "0.1.0"

__all__ = [
    "HttpRequester",
    "HttpResponse",
    "RequestOption",
    "TransportError",
    "get",
    "post",
]
