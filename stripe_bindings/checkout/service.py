"""
Checkout session service implementation.
"""

from typing import Optional
from urllib.parse import quote

from stripe_bindings.client import APIRequestor, HTTPXTransport
from stripe_bindings.params import InvalidRequestParamsError, RequestParams

from .interfaces import ICheckoutSessionService
from .models import CheckoutSession
from .params import CheckoutSessionParams


class CheckoutSessionService(ICheckoutSessionService):
    """Creates and retrieves checkout sessions through an APIRequestor."""

    PATH = "/v1/checkout/sessions"

    def __init__(self, requestor: APIRequestor):
        self._requestor = requestor

    async def create(self, params: CheckoutSessionParams) -> CheckoutSession:
        return await self._requestor.request(
            "POST", self.PATH, CheckoutSession, params
        )

    async def retrieve(
        self,
        session_id: str,
        params: Optional[RequestParams] = None,
    ) -> CheckoutSession:
        if not session_id:
            raise InvalidRequestParamsError(
                "A checkout session ID is required", param="id"
            )
        path = f"{self.PATH}/{quote(session_id, safe='')}"
        return await self._requestor.request("GET", path, CheckoutSession, params)


# Module-level instance getter
_service_instance: Optional[CheckoutSessionService] = None


def get_checkout_session_service() -> CheckoutSessionService:
    """Get the checkout session service singleton, configured from settings."""
    global _service_instance
    if _service_instance is None:
        _service_instance = CheckoutSessionService(APIRequestor(HTTPXTransport()))
    return _service_instance


def reset_checkout_session_service() -> None:
    """Reset the checkout session service singleton (for testing)."""
    global _service_instance
    _service_instance = None
