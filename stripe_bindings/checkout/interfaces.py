"""
Checkout session service interface.
"""

from typing import Optional, Protocol, runtime_checkable

from stripe_bindings.params import RequestParams

from .models import CheckoutSession
from .params import CheckoutSessionParams


@runtime_checkable
class ICheckoutSessionService(Protocol):
    """
    Interface for checkout session operations.
    """

    async def create(self, params: CheckoutSessionParams) -> CheckoutSession:
        """
        Create a new checkout session.

        Args:
            params: Session parameters (line items, URLs, expand options)

        Returns:
            The created CheckoutSession

        Raises:
            APIError: If the API rejects the parameters
        """
        ...

    async def retrieve(
        self,
        session_id: str,
        params: Optional[RequestParams] = None,
    ) -> CheckoutSession:
        """
        Retrieve an existing checkout session.

        Args:
            session_id: Checkout session identifier (cs_...)
            params: Optional request options, typically expand paths

        Returns:
            The CheckoutSession, with expanded references where requested

        Raises:
            InvalidRequestParamsError: If session_id is empty
            APIError: If the session does not exist
        """
        ...
