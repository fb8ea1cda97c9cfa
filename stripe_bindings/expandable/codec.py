"""
Expandable reference codec.

Decodes a raw value whose shape is not known in advance: a string is an
unexpanded reference (identifier only), a JSON object is the expanded
resource. Anything else is a deserialization error. Decoding is a pure
function of its input and is safe to call from any thread or task.

Raw bytes are JSON text. Any other value (str, dict, ...) is taken as already
parsed from a larger document, so a str is always an identifier. Resource
models declare strict scalar types: a mistyped attribute is an error, never
coerced.
"""

import logging
from typing import Any, Union

import pydantic
import pydantic_core

from .exceptions import DeserializationError
from .models import APIResource, Full, Identifier, R, Reference

logger = logging.getLogger(__name__)


def _parse(raw: Any, resource_type: type[APIResource]) -> Any:
    """Parse JSON bytes, passing already-decoded Python values through."""
    if not isinstance(raw, (bytes, bytearray)):
        return raw

    try:
        return pydantic_core.from_json(bytes(raw))
    except ValueError as e:
        raise DeserializationError(
            f"malformed JSON ({e})",
            resource_type=resource_type.__name__,
        ) from e


def _field_path(error: pydantic.ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return ""
    return ".".join(str(part) for part in errors[0]["loc"])


def _validate(data: dict[str, Any], resource_type: type[R]) -> R:
    try:
        return resource_type.model_validate(data)
    except pydantic.ValidationError as e:
        errors = e.errors()
        reason = errors[0]["msg"] if errors else str(e)
        raise DeserializationError(
            reason,
            resource_type=resource_type.__name__,
            field_path=_field_path(e),
        ) from e


def peek_reference(raw: Any, resource_type: type[R]) -> Reference:
    """
    Decide which shape an expandable value arrived in.

    Args:
        raw: JSON bytes for a single field, or the value already parsed
             from a larger document (a str is the identifier itself)
        resource_type: The resource class the reference points to

    Returns:
        Identifier for a bare string, Full wrapping the decoded resource
        for an object

    Raises:
        DeserializationError: If the payload is malformed JSON, neither a
            string nor an object, or an object that does not fit the schema
    """
    value = _parse(raw, resource_type)

    if isinstance(value, str):
        logger.debug(f"{resource_type.__name__} reference is unexpanded: {value}")
        return Identifier(value)

    if isinstance(value, dict):
        logger.debug(f"{resource_type.__name__} reference is expanded")
        return Full(_validate(value, resource_type))

    raise DeserializationError(
        f"expected an identifier string or an object, got {type(value).__name__}",
        resource_type=resource_type.__name__,
    )


def decode_expandable(raw: Any, resource_type: type[R]) -> R:
    """
    Decode an ID-or-object value into a single resource.

    An identifier yields a resource with only ``id`` set and
    ``is_expanded`` False. An object yields the fully populated resource.
    """
    reference = peek_reference(raw, resource_type)
    if isinstance(reference, Identifier):
        return resource_type.from_identifier(reference.id)
    return reference.resource


def decode_resource(raw: Any, resource_type: type[R]) -> R:
    """
    Decode a complete API response body into a resource.

    A response body is always an object; use decode_expandable for values
    that may also be a bare identifier.
    """
    value = _parse(raw, resource_type)
    if not isinstance(value, dict):
        raise DeserializationError(
            f"expected an object, got {type(value).__name__}",
            resource_type=resource_type.__name__,
        )
    return _validate(value, resource_type)


def encode_reference(resource: APIResource) -> Union[str, dict[str, Any]]:
    """
    Serialize a resource back to its wire shape.

    Unexpanded resources become their identifier string, expanded ones a
    JSON-compatible dict, so decoding the output gives back an equal value.
    """
    return resource.model_dump(mode="json")
