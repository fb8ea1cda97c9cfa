"""
Shared infrastructure for the API bindings.

This package contains cross-cutting concerns used by every other package:
- config: Centralized settings management
- exceptions: Base exception classes
- enums: Forward-compatible string enumerations

Note: Resource definitions should NOT go here.
"""

from .config import Settings, get_settings, configure_logging
from .enums import OpenStrEnum
from .exceptions import (
    StripeBindingsError,
    ValidationError,
    AuthenticationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "OpenStrEnum",
    "StripeBindingsError",
    "ValidationError",
    "AuthenticationError",
]
