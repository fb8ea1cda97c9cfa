"""
Transport interface.

The requestor depends on ITransport, not on an HTTP library, so tests and
applications can plug in any client that can send bytes and hand back the
status and body. Retries, pooling and rate limiting belong to the transport.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response, fully read."""

    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class ITransport(Protocol):
    """
    Interface for sending a single HTTP request.
    """

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        """
        Send one request and return the complete response.

        Args:
            method: HTTP method ("GET", "POST", "DELETE")
            url: Absolute URL including any query string
            headers: Request headers
            body: Encoded request body, if any

        Returns:
            TransportResponse with status, body and headers

        Raises:
            TransportError: If no response was received
        """
        ...
