"""
Expandable reference data models.

A field documented as expandable holds a reference to another resource. The
API returns it as the bare identifier unless the caller asked for it to be
expanded, in which case the whole nested object is inlined. The shape of the
payload is the only discriminant.

Reference is the tagged form of that choice (Identifier | Full), used by the
codec. Once folded into a parent resource the field is simply an APIResource
whose is_expanded flag records which shape arrived.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    model_serializer,
    model_validator,
)


class APIResource(BaseModel):
    """
    Base class for every resource returned by the API.

    Unknown wire fields are ignored so new server-side attributes never break
    decoding. Every attribute declared by a subclass must have a default, so
    that a resource can be built from its identifier alone.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    object: Optional[str] = None

    _expanded: bool = PrivateAttr(default=True)

    @model_validator(mode="wrap")
    @classmethod
    def _accept_identifier(cls, data: Any, handler):
        # Identifier form: the payload is just the referenced resource's id.
        if isinstance(data, str):
            return cls.from_identifier(data)
        return handler(data)

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        if not self._expanded:
            return self.id
        return handler(self)

    @classmethod
    def from_identifier(cls, identifier: str):
        """Build an unexpanded resource carrying only its identifier."""
        resource = cls(id=identifier)
        resource._expanded = False
        return resource

    @property
    def is_expanded(self) -> bool:
        """False when only the identifier was returned for this resource."""
        return self._expanded

    @classmethod
    def expandable_fields(cls) -> list[str]:
        """Names of the fields the API documents as expandable."""
        return [
            name
            for name, field in cls.model_fields.items()
            if any(isinstance(m, ExpandableField) for m in field.metadata)
        ]


class ExpandableField:
    """Annotation marker for fields the API documents as expandable."""

    def __repr__(self) -> str:
        return "ExpandableField()"


R = TypeVar("R", bound=APIResource)

# Field annotation for an ID-or-object reference, e.g. Expandable[Customer].
Expandable = Annotated[Optional[R], ExpandableField()]


@dataclass(frozen=True)
class Identifier:
    """Unexpanded reference: only the identifier was sent."""

    id: str


@dataclass(frozen=True)
class Full(Generic[R]):
    """Expanded reference: the full resource was inlined."""

    resource: R

    @property
    def id(self) -> str:
        return self.resource.id


Reference = Union[Identifier, Full[R]]
