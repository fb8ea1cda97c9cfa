"""
API client module.

Public API:
- ITransport, TransportResponse: Transport interface
- HTTPXTransport: httpx implementation
- APIRequestor: Authenticated request/decode pipeline
- APIError, TransportError
"""

from .interfaces import ITransport, TransportResponse
from .transport import HTTPXTransport
from .requestor import APIRequestor
from .exceptions import APIError, TransportError

__all__ = [
    "ITransport",
    "TransportResponse",
    "HTTPXTransport",
    "APIRequestor",
    "APIError",
    "TransportError",
]
