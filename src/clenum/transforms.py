"""
JSON transforms for literal enum fields.

An EnumTransform converts between the wire representation of an enum
field (a JSON string or null) and a LiteralEnum value of one family.
Serialization code calls it for every field typed as a LiteralEnum.

Deserialization is permissive: an unknown literal becomes a new member
of the family instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Generic, Optional, Type, TypeVar

from clenum.literal import LiteralEnum

E = TypeVar("E", bound=LiteralEnum)


@dataclass(frozen=True)
class EnumTransform(Generic[E]):
    """
    Bidirectional wire conversion for one enum family.

    Properties:
        enum_class: The LiteralEnum subclass values are resolved against

    Guarantee:
        to_json(from_json(s)) == s for every string s
    """

    enum_class: Type[E]

    def from_json(self, value: Optional[str]) -> Optional[E]:
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(
                f"{self.enum_class.__name__} expects a JSON string, got {type(value).__name__}"
            )
        return self.enum_class.for_literal(value)

    def to_json(self, value: Optional[E]) -> Optional[str]:
        if value is None:
            return None
        # Matched on family so values created before a module reload still encode.
        if not isinstance(value, LiteralEnum) or value.family != self.enum_class.family:
            raise TypeError(
                f"Expected {self.enum_class.__name__}, got {type(value).__name__}"
            )
        return value.literal


@lru_cache(maxsize=None)
def enum_transform(enum_class: Type[E]) -> EnumTransform[E]:
    """Return the shared transform for an enum family."""
    return EnumTransform(enum_class)
