"""
Checkout session data models.

A checkout session is the hosted payment page's record of one purchase
attempt. Its customer, payment intent and subscription are expandable
references.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt

from stripe_bindings.expandable import APIResource, Expandable
from stripe_bindings.resources.models import (
    Currency,
    Customer,
    PaymentIntent,
    Plan,
    SKU,
    Subscription,
)
from stripe_bindings.shared.enums import OpenStrEnum


class CheckoutSessionSubmitType(OpenStrEnum):
    """Label shown on the checkout page's submit button."""

    AUTO = "auto"
    BOOK = "book"
    DONATE = "donate"
    PAY = "pay"


class CheckoutSessionDisplayItemType(OpenStrEnum):
    """Kind of item shown on the checkout page."""

    CUSTOM = "custom"
    PLAN = "plan"
    SKU = "sku"


class CheckoutSessionDisplayItemCustom(BaseModel):
    """An ad-hoc line item defined at session creation."""

    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = None
    images: Optional[list[str]] = None
    name: Optional[str] = None


class CheckoutSessionDisplayItem(BaseModel):
    """
    One item shown on the checkout page.

    Exactly one of custom, plan or sku is set, matching ``type``.
    """

    model_config = ConfigDict(extra="ignore")

    amount: Optional[StrictInt] = None
    currency: Optional[Currency] = None
    custom: Optional[CheckoutSessionDisplayItemCustom] = None
    quantity: Optional[StrictInt] = None
    plan: Optional[Plan] = None
    sku: Optional[SKU] = None
    type: Optional[CheckoutSessionDisplayItemType] = None


class CheckoutSession(APIResource):
    """A hosted checkout session."""

    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    customer: Expandable[Customer] = None
    customer_email: Optional[str] = None
    deleted: StrictBool = False
    display_items: Optional[list[CheckoutSessionDisplayItem]] = None
    livemode: StrictBool = False
    locale: Optional[str] = None
    payment_intent: Expandable[PaymentIntent] = None
    payment_method_types: Optional[list[str]] = None
    subscription: Expandable[Subscription] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None
    success_url: Optional[str] = None
