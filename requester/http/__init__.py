"""
HTTP Module

GET/POST helper returning a fixed-shape response, with typed transport errors.
"""

from requester.schemas.errors import TransportError

from .client import HttpRequester, HttpResponse, get, post
from .encoding import encode_body, encode_form
from .options import RequestOption, build_header_lines, merge_options

__all__ = [
    "HttpRequester",
    "HttpResponse",
    "RequestOption",
    "TransportError",
    "build_header_lines",
    "encode_body",
    "encode_form",
    "get",
    "merge_options",
    "post",
]
