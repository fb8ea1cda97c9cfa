"""
Core resource models.

Response shapes for the resources a checkout session links to. Only the
attributes callers rely on are declared; anything else the API sends is
ignored. Fields typed Expandable[...] arrive as an identifier unless the
request expanded them. Integer and boolean attributes use strict types, so
a mistyped value is rejected instead of coerced.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt

from stripe_bindings.expandable import APIResource, Expandable
from stripe_bindings.shared.enums import OpenStrEnum

# Three-letter ISO currency code, lowercase (e.g. "usd").
Currency = str


class PaymentIntentStatus(OpenStrEnum):
    """Lifecycle status of a PaymentIntent."""

    CANCELED = "canceled"
    PROCESSING = "processing"
    REQUIRES_ACTION = "requires_action"
    REQUIRES_CAPTURE = "requires_capture"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    SUCCEEDED = "succeeded"


class PaymentIntentCaptureMethod(OpenStrEnum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"


class SubscriptionStatus(OpenStrEnum):
    """Lifecycle status of a Subscription."""

    ACTIVE = "active"
    CANCELED = "canceled"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    PAST_DUE = "past_due"
    TRIALING = "trialing"
    UNPAID = "unpaid"


class PlanInterval(OpenStrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class PlanUsageType(OpenStrEnum):
    LICENSED = "licensed"
    METERED = "metered"


class ProductType(OpenStrEnum):
    GOOD = "good"
    SERVICE = "service"


class Address(BaseModel):
    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingDetails(BaseModel):
    """Shipping information attached to a charge or payment intent."""

    model_config = ConfigDict(extra="ignore")

    address: Optional[Address] = None
    carrier: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None


class Customer(APIResource):
    """A customer of the account."""

    balance: Optional[StrictInt] = None
    created: Optional[StrictInt] = None
    currency: Optional[Currency] = None
    deleted: StrictBool = False
    description: Optional[str] = None
    email: Optional[str] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    shipping: Optional[ShippingDetails] = None


class Product(APIResource):
    """A good or service offered for sale."""

    active: StrictBool = False
    caption: Optional[str] = None
    created: Optional[StrictInt] = None
    deleted: StrictBool = False
    description: Optional[str] = None
    images: Optional[list[str]] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    name: Optional[str] = None
    type: Optional[ProductType] = None
    unit_label: Optional[str] = None
    updated: Optional[StrictInt] = None


class Plan(APIResource):
    """Recurring pricing for a product."""

    active: StrictBool = False
    amount: Optional[StrictInt] = None
    created: Optional[StrictInt] = None
    currency: Optional[Currency] = None
    deleted: StrictBool = False
    interval: Optional[PlanInterval] = None
    interval_count: Optional[StrictInt] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    nickname: Optional[str] = None
    product: Expandable[Product] = None
    trial_period_days: Optional[StrictInt] = None
    usage_type: Optional[PlanUsageType] = None


class SKUInventory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quantity: Optional[StrictInt] = None
    type: Optional[str] = None
    value: Optional[str] = None


class SKU(APIResource):
    """A stock keeping unit: one purchasable variant of a product."""

    active: StrictBool = False
    attributes: Optional[dict[str, str]] = None
    created: Optional[StrictInt] = None
    currency: Optional[Currency] = None
    deleted: StrictBool = False
    image: Optional[str] = None
    inventory: Optional[SKUInventory] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    price: Optional[StrictInt] = None
    product: Expandable[Product] = None
    updated: Optional[StrictInt] = None


class PaymentIntentTransferData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    destination: Optional[str] = None


class PaymentIntent(APIResource):
    """A single attempt to collect a payment from a customer."""

    amount: Optional[StrictInt] = None
    amount_capturable: Optional[StrictInt] = None
    amount_received: Optional[StrictInt] = None
    application_fee_amount: Optional[StrictInt] = None
    canceled_at: Optional[StrictInt] = None
    cancellation_reason: Optional[str] = None
    capture_method: Optional[PaymentIntentCaptureMethod] = None
    client_secret: Optional[str] = None
    created: Optional[StrictInt] = None
    currency: Optional[Currency] = None
    customer: Expandable[Customer] = None
    description: Optional[str] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    on_behalf_of: Optional[str] = None
    payment_method_types: Optional[list[str]] = None
    receipt_email: Optional[str] = None
    setup_future_usage: Optional[str] = None
    shipping: Optional[ShippingDetails] = None
    statement_descriptor: Optional[str] = None
    status: Optional[PaymentIntentStatus] = None
    transfer_data: Optional[PaymentIntentTransferData] = None


class Subscription(APIResource):
    """A customer's recurring charge on a plan."""

    cancel_at_period_end: StrictBool = False
    canceled_at: Optional[StrictInt] = None
    created: Optional[StrictInt] = None
    current_period_end: Optional[StrictInt] = None
    current_period_start: Optional[StrictInt] = None
    customer: Expandable[Customer] = None
    ended_at: Optional[StrictInt] = None
    livemode: StrictBool = False
    metadata: Optional[dict[str, str]] = None
    plan: Optional[Plan] = None
    quantity: Optional[StrictInt] = None
    start_date: Optional[StrictInt] = None
    status: Optional[SubscriptionStatus] = None
    trial_end: Optional[StrictInt] = None
    trial_start: Optional[StrictInt] = None
