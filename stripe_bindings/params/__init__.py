"""
Request parameters module.

Public API:
- RequestOptions: Options shared by every request (expand, metadata, ...)
- RequestParams: Base class for parameter types
- encode_form, encode_body, encode_headers: Wire encoding
- EncodingError, InvalidRequestParamsError
"""

from .models import RequestOptions, RequestParams
from .encoder import encode_form, encode_body, encode_headers
from .exceptions import EncodingError, InvalidRequestParamsError

__all__ = [
    "RequestOptions",
    "RequestParams",
    "encode_form",
    "encode_body",
    "encode_headers",
    "EncodingError",
    "InvalidRequestParamsError",
]
