"""
Checkout session request parameters.

See https://stripe.com/docs/api/checkout/sessions/create
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from stripe_bindings.params import RequestParams
from stripe_bindings.resources.models import PaymentIntentCaptureMethod
from stripe_bindings.resources.params import ShippingDetailsParams

from .models import CheckoutSessionSubmitType


class CheckoutSessionLineItemParams(BaseModel):
    """A line item on a checkout session."""

    model_config = ConfigDict(extra="forbid")

    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    images: Optional[list[str]] = None
    name: Optional[str] = None
    quantity: Optional[int] = None


class CheckoutSessionPaymentIntentDataTransferDataParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    destination: Optional[str] = None


class CheckoutSessionPaymentIntentDataParams(RequestParams):
    """Parameters for the payment intent the session creates."""

    application_fee_amount: Optional[int] = None
    capture_method: Optional[PaymentIntentCaptureMethod] = None
    description: Optional[str] = None
    on_behalf_of: Optional[str] = None
    receipt_email: Optional[str] = None
    setup_future_usage: Optional[str] = None
    shipping: Optional[ShippingDetailsParams] = None
    statement_descriptor: Optional[str] = None
    transfer_data: Optional[CheckoutSessionPaymentIntentDataTransferDataParams] = None


class CheckoutSessionSubscriptionDataItemsParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plan: Optional[str] = None
    quantity: Optional[int] = None


class CheckoutSessionSubscriptionDataParams(RequestParams):
    """Parameters for the subscription the session creates."""

    items: Optional[list[CheckoutSessionSubscriptionDataItemsParams]] = None
    trial_end: Optional[int] = None
    trial_period_days: Optional[int] = None


class CheckoutSessionParams(RequestParams):
    """Parameters for creating a checkout session."""

    billing_address_collection: Optional[str] = None
    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    customer: Optional[str] = None
    customer_email: Optional[str] = None
    line_items: Optional[list[CheckoutSessionLineItemParams]] = None
    locale: Optional[str] = None
    payment_intent_data: Optional[CheckoutSessionPaymentIntentDataParams] = None
    payment_method_types: Optional[list[str]] = None
    subscription_data: Optional[CheckoutSessionSubscriptionDataParams] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None
    success_url: Optional[str] = None
