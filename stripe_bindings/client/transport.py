"""
httpx-based transport.
"""

import logging
from typing import Optional

import httpx

from stripe_bindings.shared.config import Settings, get_settings

from .exceptions import TransportError
from .interfaces import ITransport, TransportResponse

logger = logging.getLogger(__name__)


class HTTPXTransport(ITransport):
    """
    Transport backed by httpx.AsyncClient.

    When no client is injected a short-lived client is opened per request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the transport.

        Args:
            client: Shared client to send through
            timeout: Request timeout in seconds, overriding settings.timeout
            settings: Client settings. If None, uses get_settings().
        """
        self._client = client
        if timeout is None:
            timeout = (settings or get_settings()).timeout
        self._timeout = timeout

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        try:
            if self._client is not None:
                response = await self._send(self._client, method, url, headers, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, method, url, headers, body)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(str(e), url=url) from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Optional[bytes],
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            headers=headers,
            content=body,
            timeout=self._timeout,
        )
