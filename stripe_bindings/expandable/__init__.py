"""
Expandable reference module.

Handles fields the API returns either as a bare identifier or as the full
nested resource, depending on the request's expand options.

Public API:
- APIResource: Base class for every decoded resource
- Expandable: Field annotation for ID-or-object references
- Identifier, Full, Reference: Tagged form of the two wire shapes
- peek_reference, decode_expandable, decode_resource, encode_reference
- DeserializationError
"""

from .models import (
    APIResource,
    Expandable,
    ExpandableField,
    Identifier,
    Full,
    Reference,
)
from .codec import (
    peek_reference,
    decode_expandable,
    decode_resource,
    encode_reference,
)
from .exceptions import DeserializationError

__all__ = [
    # Models
    "APIResource",
    "Expandable",
    "ExpandableField",
    "Identifier",
    "Full",
    "Reference",
    # Codec
    "peek_reference",
    "decode_expandable",
    "decode_resource",
    "encode_reference",
    # Exceptions
    "DeserializationError",
]
