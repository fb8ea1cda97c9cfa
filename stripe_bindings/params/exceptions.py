"""
Request parameter exceptions.
"""

from typing import Any

from stripe_bindings.shared.exceptions import StripeBindingsError, ValidationError


class EncodingError(StripeBindingsError):
    """Raised when a parameter value has no form encoding."""

    def __init__(self, key: str, value: Any):
        super().__init__(
            f"Cannot form-encode parameter '{key}' of type {type(value).__name__}",
            code="ENCODING_ERROR",
            details={"key": key, "value_type": type(value).__name__},
        )


class InvalidRequestParamsError(ValidationError):
    """Raised when request parameters are rejected before sending."""

    def __init__(self, message: str, param: str):
        super().__init__(
            message,
            code="INVALID_REQUEST_PARAMS",
            details={"param": param},
        )
        self.param = param
