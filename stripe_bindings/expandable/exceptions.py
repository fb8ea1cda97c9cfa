"""
Expandable reference decoding exceptions.
"""

from typing import Optional

from stripe_bindings.shared.exceptions import StripeBindingsError


class DeserializationError(StripeBindingsError):
    """
    Raised when a payload cannot be decoded into the target resource.

    The field path points at the offending value using dotted notation
    (e.g. "payment_intent.amount" or "display_items.0.plan"). An empty path
    means the payload itself was unusable.
    """

    def __init__(
        self,
        message: str,
        resource_type: str,
        field_path: Optional[str] = None,
    ):
        location = f" at '{field_path}'" if field_path else ""
        super().__init__(
            f"Could not decode {resource_type}{location}: {message}",
            code="DESERIALIZATION_ERROR",
            details={
                "resource_type": resource_type,
                "field_path": field_path or "",
                "reason": message,
            },
        )
        self.resource_type = resource_type
        self.field_path = field_path or ""
