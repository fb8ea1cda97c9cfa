"""
API client exceptions.

These are raised by the requestor and the transport, and can be caught by
callers to tell API rejections apart from network failures.
"""

import json
from typing import Any, Optional

from stripe_bindings.shared.exceptions import StripeBindingsError


class TransportError(StripeBindingsError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(
            f"Network error: {message}",
            code="TRANSPORT_ERROR",
            details={"url": url} if url else {},
        )


class APIError(StripeBindingsError):
    """
    Raised for any non-2xx response.

    The API wraps failures in an envelope of the form
    {"error": {"type": ..., "code": ..., "message": ..., "param": ...}};
    its fields are exposed as attributes when present.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: Optional[str] = None,
        error_code: Optional[str] = None,
        param: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        details: dict[str, Any] = {"status_code": status_code}
        for key, value in (
            ("type", error_type),
            ("code", error_code),
            ("param", param),
            ("request_id", request_id),
        ):
            if value:
                details[key] = value

        super().__init__(message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.error_type = error_type
        self.error_code = error_code
        self.param = param
        self.request_id = request_id

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: bytes,
        headers: Optional[dict[str, str]] = None,
    ) -> "APIError":
        """Build an APIError from a raw error response."""
        request_id = None
        for name, value in (headers or {}).items():
            if name.lower() == "request-id":
                request_id = value

        try:
            envelope = json.loads(body or b"null")
        except ValueError:
            envelope = None

        error = envelope.get("error") if isinstance(envelope, dict) else None
        if not isinstance(error, dict):
            text = body.decode("utf-8", errors="replace").strip()
            return cls(
                text or f"Request failed with status {status_code}",
                status_code=status_code,
                request_id=request_id,
            )

        return cls(
            error.get("message") or f"Request failed with status {status_code}",
            status_code=status_code,
            error_type=error.get("type"),
            error_code=error.get("code"),
            param=error.get("param"),
            request_id=request_id,
        )
