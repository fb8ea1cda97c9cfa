"""
Request parameter base models.

Every parameter type holds the shared RequestOptions under its ``options``
field. The encoder flattens the body-level options (expand, metadata, extra)
into the same form level as the owning parameters; the header-level options
(idempotency key, connected account) travel as HTTP headers instead.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """Options accepted by every request, regardless of resource."""

    model_config = ConfigDict(extra="forbid")

    expand: Optional[list[str]] = Field(
        None,
        description="Dotted paths of expandable fields to inline in the response",
    )
    metadata: Optional[dict[str, str]] = Field(
        None,
        description="Key/value pairs attached to the object",
    )
    extra: Optional[dict[str, Any]] = Field(
        None,
        description="Undocumented parameters sent verbatim",
    )
    idempotency_key: Optional[str] = Field(None, description="Idempotency-Key header")
    stripe_account: Optional[str] = Field(None, description="Stripe-Account header")


class RequestParams(BaseModel):
    """Base class for request parameter types."""

    model_config = ConfigDict(extra="forbid")

    options: RequestOptions = Field(default_factory=RequestOptions)

    def add_expand(self, path: str) -> None:
        """Ask for the field at ``path`` to be expanded in the response."""
        if self.options.expand is None:
            self.options.expand = []
        self.options.expand.append(path)

    def add_metadata(self, key: str, value: str) -> None:
        if self.options.metadata is None:
            self.options.metadata = {}
        self.options.metadata[key] = value

    def add_extra(self, key: str, value: Any) -> None:
        """Send a parameter this library does not declare yet."""
        if self.options.extra is None:
            self.options.extra = {}
        self.options.extra[key] = value

    def set_idempotency_key(self, key: str) -> None:
        self.options.idempotency_key = key

    def set_stripe_account(self, account: str) -> None:
        self.options.stripe_account = account
