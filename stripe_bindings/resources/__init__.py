"""
Core resources module.

Customer, Product, Plan, SKU, PaymentIntent and Subscription response
models, their enumerations, and shared parameter types.
"""

from .models import (
    Currency,
    Address,
    ShippingDetails,
    Customer,
    Product,
    ProductType,
    Plan,
    PlanInterval,
    PlanUsageType,
    SKU,
    SKUInventory,
    PaymentIntent,
    PaymentIntentStatus,
    PaymentIntentCaptureMethod,
    PaymentIntentTransferData,
    Subscription,
    SubscriptionStatus,
)
from .params import AddressParams, ShippingDetailsParams

__all__ = [
    "Currency",
    "Address",
    "ShippingDetails",
    "Customer",
    "Product",
    "ProductType",
    "Plan",
    "PlanInterval",
    "PlanUsageType",
    "SKU",
    "SKUInventory",
    "PaymentIntent",
    "PaymentIntentStatus",
    "PaymentIntentCaptureMethod",
    "PaymentIntentTransferData",
    "Subscription",
    "SubscriptionStatus",
    "AddressParams",
    "ShippingDetailsParams",
]
