"""
API requestor.

Turns a method, path and parameter model into an authenticated HTTP request,
checks the response status, and decodes successful bodies into resources.
"""

import logging
from typing import Optional

from stripe_bindings.expandable import decode_resource
from stripe_bindings.expandable.models import R
from stripe_bindings.params import RequestParams, encode_body, encode_headers
from stripe_bindings.shared.config import Settings, get_settings
from stripe_bindings.shared.exceptions import AuthenticationError

from .exceptions import APIError
from .interfaces import ITransport

logger = logging.getLogger(__name__)


class APIRequestor:
    """Sends requests through a transport and decodes the responses."""

    def __init__(
        self,
        transport: ITransport,
        settings: Optional[Settings] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the requestor.

        Args:
            transport: Transport used to send requests
            settings: Client settings. If None, uses get_settings().
            api_key: Secret key overriding settings.api_key
        """
        self._transport = transport
        self._settings = settings or get_settings()
        self._api_key = api_key or self._settings.api_key

    def _headers(self, params: Optional[RequestParams]) -> dict[str, str]:
        if not self._api_key:
            raise AuthenticationError(
                "No API key provided. Set STRIPE_API_KEY or pass api_key."
            )

        headers = {"Authorization": f"Bearer {self._api_key}"}
        if self._settings.api_version:
            headers["Stripe-Version"] = self._settings.api_version
        if params is not None:
            headers.update(encode_headers(params))
        return headers

    async def request(
        self,
        method: str,
        path: str,
        resource_type: type[R],
        params: Optional[RequestParams] = None,
    ) -> R:
        """
        Send a request and decode the response body.

        Args:
            method: HTTP method
            path: API path, e.g. "/v1/checkout/sessions"
            resource_type: Resource class the response decodes into
            params: Request parameters, encoded as a query string for GET
                    and as the form body otherwise

        Returns:
            The decoded resource

        Raises:
            AuthenticationError: If no API key is configured
            TransportError: If the transport could not complete the request
            APIError: If the API answered with a non-2xx status
            DeserializationError: If the response body does not decode
        """
        headers = self._headers(params)
        url = self._settings.api_base.rstrip("/") + path
        encoded = encode_body(params) if params is not None else ""

        body = None
        if method.upper() == "GET":
            if encoded:
                url = f"{url}?{encoded}"
        else:
            body = encoded.encode("utf-8")
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        logger.debug(f"{method} {path}")
        response = await self._transport.request(method, url, headers, body)

        if not 200 <= response.status_code < 300:
            error = APIError.from_response(
                response.status_code, response.body, response.headers
            )
            logger.warning(
                f"{method} {path} failed with {response.status_code}: {error.message}"
            )
            raise error

        return decode_resource(response.body, resource_type)
