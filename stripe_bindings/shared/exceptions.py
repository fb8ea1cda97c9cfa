"""
Base exception classes for the API bindings.

Each package defines its own exceptions that inherit from these bases,
so callers can catch StripeBindingsError for anything raised here.
"""

from typing import Optional, Any


class StripeBindingsError(Exception):
    """
    Base exception for all binding errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging or error reports."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StripeBindingsError):
    """Caller input failed validation before a request was sent."""

    pass


class AuthenticationError(StripeBindingsError):
    """No usable credentials were configured."""

    def __init__(self, message: str = "No API key provided"):
        super().__init__(message, code="AUTHENTICATION_ERROR")
