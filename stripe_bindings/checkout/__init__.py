"""
Checkout module.

Public API:
- ICheckoutSessionService: Interface for checkout session operations
- CheckoutSession and its display item models
- CheckoutSessionSubmitType, CheckoutSessionDisplayItemType
- CheckoutSessionParams and nested parameter types
"""

from .interfaces import ICheckoutSessionService
from .models import (
    CheckoutSession,
    CheckoutSessionDisplayItem,
    CheckoutSessionDisplayItemCustom,
    CheckoutSessionDisplayItemType,
    CheckoutSessionSubmitType,
)
from .params import (
    CheckoutSessionParams,
    CheckoutSessionLineItemParams,
    CheckoutSessionPaymentIntentDataParams,
    CheckoutSessionPaymentIntentDataTransferDataParams,
    CheckoutSessionSubscriptionDataParams,
    CheckoutSessionSubscriptionDataItemsParams,
)
from .service import (
    CheckoutSessionService,
    get_checkout_session_service,
    reset_checkout_session_service,
)

__all__ = [
    # Interface
    "ICheckoutSessionService",
    # Models
    "CheckoutSession",
    "CheckoutSessionDisplayItem",
    "CheckoutSessionDisplayItemCustom",
    "CheckoutSessionDisplayItemType",
    "CheckoutSessionSubmitType",
    # Params
    "CheckoutSessionParams",
    "CheckoutSessionLineItemParams",
    "CheckoutSessionPaymentIntentDataParams",
    "CheckoutSessionPaymentIntentDataTransferDataParams",
    "CheckoutSessionSubscriptionDataParams",
    "CheckoutSessionSubscriptionDataItemsParams",
    # Service
    "CheckoutSessionService",
    "get_checkout_session_service",
    "reset_checkout_session_service",
]
