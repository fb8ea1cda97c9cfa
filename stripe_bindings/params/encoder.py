"""
Form encoder for request parameters.

The API takes application/x-www-form-urlencoded bodies with bracket notation
for nesting:

    line_items[0][amount]=500
    payment_method_types[0]=card
    metadata[order_id]=6735

Attributes left as None are omitted entirely. An empty string is sent as an
explicit empty value, which the API reads as "clear this field".
Idempotency key and connected account are headers, so they may only be set
on the top-level parameters.
"""

from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from .exceptions import EncodingError, InvalidRequestParamsError
from .models import RequestOptions, RequestParams

FormPairs = list[tuple[str, str]]


def _key(prefix: str, name: str) -> str:
    return f"{prefix}[{name}]" if prefix else name


def _encode_value(key: str, value: Any, pairs: FormPairs) -> None:
    if value is None:
        return

    if isinstance(value, bool):
        pairs.append((key, "true" if value else "false"))
    elif isinstance(value, Enum):
        pairs.append((key, str(value.value)))
    elif isinstance(value, str):
        pairs.append((key, value))
    elif isinstance(value, (int, float, Decimal)):
        pairs.append((key, str(value)))
    elif isinstance(value, (list, tuple)):
        if not value:
            pairs.append((key, ""))
        for index, item in enumerate(value):
            _encode_value(f"{key}[{index}]", item, pairs)
    elif isinstance(value, dict):
        for name, item in value.items():
            _encode_value(f"{key}[{name}]", item, pairs)
    elif isinstance(value, BaseModel):
        _encode_model(key, value, pairs)
    else:
        raise EncodingError(key, value)


def _encode_options(prefix: str, options: RequestOptions, pairs: FormPairs) -> None:
    # Header options only apply to the top-level request.
    if prefix:
        for name in ("idempotency_key", "stripe_account"):
            if getattr(options, name):
                raise InvalidRequestParamsError(
                    f"{name} is a request header and cannot be set on {prefix}",
                    param=f"{prefix}[{name}]",
                )

    _encode_value(_key(prefix, "expand"), options.expand, pairs)
    _encode_value(_key(prefix, "metadata"), options.metadata, pairs)
    for name, value in (options.extra or {}).items():
        _encode_value(_key(prefix, name), value, pairs)


def _encode_model(prefix: str, model: BaseModel, pairs: FormPairs) -> None:
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if isinstance(value, RequestOptions):
            _encode_options(prefix, value, pairs)
            continue
        wire_name = field.serialization_alias or field.alias or name
        _encode_value(_key(prefix, wire_name), value, pairs)


def encode_form(params: RequestParams) -> FormPairs:
    """
    Flatten request parameters into ordered form pairs.

    Args:
        params: Any parameter model

    Returns:
        List of (key, value) pairs in declaration order

    Raises:
        EncodingError: If a value has no form representation
    """
    pairs: FormPairs = []
    _encode_model("", params, pairs)
    return pairs


def encode_body(params: RequestParams) -> str:
    """Encode request parameters as a urlencoded body or query string."""
    return urlencode(encode_form(params))


def encode_headers(params: RequestParams) -> dict[str, str]:
    """Per-request headers carried by the parameters' options."""
    headers: dict[str, str] = {}
    if params.options.idempotency_key:
        headers["Idempotency-Key"] = params.options.idempotency_key
    if params.options.stripe_account:
        headers["Stripe-Account"] = params.options.stripe_account
    return headers
