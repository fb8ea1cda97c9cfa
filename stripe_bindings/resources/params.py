"""
Parameter types shared by several resources.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AddressParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    city: Optional[str] = None
    country: Optional[str] = None
    line1: str
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingDetailsParams(BaseModel):
    """Shipping information for a payment."""

    model_config = ConfigDict(extra="forbid")

    address: AddressParams
    carrier: Optional[str] = None
    name: str
    phone: Optional[str] = None
    tracking_number: Optional[str] = None
