"""
Literal Enum Base Class

A LiteralEnum is a Java-like enum value backed by the string literal that
the remote API sends over the wire. Python's Enum is a closed set; the API
may introduce new codes before the client knows about them, so values here
are resolved through a registry that admits any literal.

Declaring a family:

    class Country(LiteralEnum):
        family = "country"

        @classmethod
        def au(cls) -> "Country":
            return cls.for_literal("AU")

        @classmethod
        def nz(cls) -> "Country":
            return cls.for_literal("NZ")

    Country.au() is Country("AU")          # True, same instance
    Country.au() == Country("au")          # True, case-insensitive
    Country.au() is Country("au")          # False, separate registry entry

EQUALITY RULES:
    - Equality compares literals case-insensitively
    - Family is NOT part of equality: Country("AU") == Currency("au")
    - hash() follows the same rule, so equal values hash equal
    - Ordering is lexicographic over the upper-cased literal

Instances are immutable and canonical: construction always goes through
the registry, and copies or unpickled values resolve to the same object.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Type, TypeVar

from clenum.registry import EnumRegistry, get_registry

E = TypeVar("E", bound="LiteralEnum")


class EnumDeclarationError(Exception):
    """Raised when a LiteralEnum subclass is used without a family identifier."""
    pass


class LiteralEnum:
    """
    Base class for literal enum families.

    Subclasses set `family` and expose accessors that call for_literal().
    Set `registry` to a private EnumRegistry to isolate a family from the
    process-wide one.
    """

    family: ClassVar[Optional[str]] = None
    registry: ClassVar[Optional[EnumRegistry]] = None

    __slots__ = ("_literal",)

    def __new__(cls: Type[E], literal: str) -> E:
        return cls.for_literal(literal)

    @classmethod
    def for_literal(cls: Type[E], literal: str) -> E:
        """
        Fetch the family's value for a literal, creating it if needed.

        Args:
            literal: Wire-level code, matched exactly

        Returns:
            The canonical instance for (cls.family, literal)

        Raises:
            EnumDeclarationError: If the class declares no family
        """
        if not cls.family:
            raise EnumDeclarationError(f"{cls.__name__} does not declare a family")
        registry = cls.registry if cls.registry is not None else get_registry()
        return registry.get_or_create(cls.family, literal, cls)

    @classmethod
    def _new_member(cls: Type[E], literal: str) -> E:
        # Only the registry calls this.
        member = object.__new__(cls)
        object.__setattr__(member, "_literal", literal)
        return member

    @property
    def literal(self) -> str:
        """The literal marshalled over the wire for this value."""
        return self._literal

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __reduce__(self):
        return (type(self), (self._literal,))

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: LiteralEnum) -> int:
        """
        Order two values by upper-cased literal.

        Returns:
            -1, 0 or 1
        """
        mine = self._literal.upper()
        theirs = other.literal.upper()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def equals(self, other: LiteralEnum) -> bool:
        """True when both literals match ignoring case. Family is ignored."""
        return self.compare(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LiteralEnum):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self._literal.upper())

    def __str__(self) -> str:
        return self._literal

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._literal!r})"


def optional_equals(lhs: Optional[LiteralEnum], rhs: Optional[LiteralEnum]) -> bool:
    """
    Null-aware equality.

    Two missing values are equal, a missing and a present value are not,
    and two present values are compared with LiteralEnum.equals.
    """
    if lhs is None and rhs is None:
        return True
    if lhs is None or rhs is None:
        return False
    return lhs.equals(rhs)
