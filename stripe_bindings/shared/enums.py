"""
Open string enumerations.

The API documents a fixed set of values for many string fields but adds new
ones over time. OpenStrEnum keeps the documented values as regular members
and passes any other string through as an unrecognized pseudo-member, so a
response never fails to decode because of a value this library predates.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class OpenStrEnum(str, Enum):
    """String enum that preserves unknown values verbatim."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        logger.debug(f"Unrecognized {cls.__name__} value: {value!r}")
        member = str.__new__(cls, value)
        member._name_ = "UNRECOGNIZED"
        member._value_ = value
        return member

    @property
    def is_recognized(self) -> bool:
        """Whether this value is one of the documented members."""
        return type(self).__members__.get(self._name_) is self

    def __str__(self) -> str:
        return self._value_
