"""
Process-wide memoization store for literal enum values.

The registry guarantees that, for a given family identifier and an exact
(case-sensitive) literal string, at most one enum instance ever exists.
Every family subclass of LiteralEnum resolves its values through here.

Layout:
    family -> {literal -> instance}

    One bucket per family. Each bucket is bound to the class that declares
    the family. A class with the same module and qualified name (the same
    declaration, e.g. after importlib.reload) takes over the bucket; values
    created before the reload keep their identity and their old class.
    Any other class, a subclass of the owner included, is rejected.

LIFECYCLE:
    The default registry is created lazily by get_registry() and lives
    until the process exits. Entries are never evicted.

IMPORTANT:
    Storage keys are NOT case-folded. "SHOW_ONCE" and "show_once" are two
    entries (two instances) even though they compare equal.
    The empty string is a valid literal; only the family must be non-empty.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Type, TypeVar

if TYPE_CHECKING:
    from clenum.literal import LiteralEnum

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="LiteralEnum")


class FamilyConflictError(Exception):
    """Raised when two unrelated classes claim the same family identifier."""
    pass


def _check_str(kind: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"Enum {kind} must be a str, got {type(value).__name__}")


def _same_declaration(a: type, b: type) -> bool:
    return a.__module__ == b.__module__ and a.__qualname__ == b.__qualname__


class EnumRegistry:
    """
    Thread-safe map of (family, literal) to a unique enum instance.

    A single lock covers the check-then-insert sequence in get_or_create,
    so concurrent callers asking for the same key all receive the one
    instance that was stored first.
    """

    def __init__(self) -> None:
        self._buckets: Dict[str, Dict[str, "LiteralEnum"]] = {}
        self._owners: Dict[str, type] = {}
        self._lock = threading.Lock()

    def get_or_create(self, family: str, literal: str, enum_class: Type[E]) -> E:
        """
        Fetch the instance for (family, literal), creating it if needed.

        Any literal is accepted. Unknown literals are admitted as new
        members of the family; this is how codes introduced by the remote
        API ahead of the client are carried through.

        Args:
            family: Family identifier (e.g. "alert_message_frequency")
            literal: Wire-level code (e.g. "SHOW_ONCE"), matched exactly
            enum_class: Concrete LiteralEnum subclass that owns the family.
                Fresh instances are created with this class.

        Returns:
            The unique instance for this key

        Raises:
            TypeError: If family or literal is not a string
            ValueError: If family is empty
            FamilyConflictError: If the family is already bound to another class
        """
        _check_str("family", family)
        _check_str("literal", literal)
        if not family:
            raise ValueError("Enum family must be a non-empty string")

        with self._lock:
            owner = self._owners.setdefault(family, enum_class)
            if owner is not enum_class:
                if not _same_declaration(owner, enum_class):
                    raise FamilyConflictError(
                        f"Family '{family}' is bound to {owner.__module__}.{owner.__qualname__}, "
                        f"not {enum_class.__module__}.{enum_class.__qualname__}"
                    )
                self._owners[family] = enum_class
                logger.debug("Rebound %s to reloaded %s", family, enum_class.__qualname__)

            bucket = self._buckets.setdefault(family, {})
            instance = bucket.get(literal)
            if instance is None:
                instance = enum_class._new_member(literal)
                bucket[literal] = instance
                logger.debug("Registered %s literal %r", family, literal)
            return instance  # type: ignore[return-value]

    def literals(self, family: str) -> List[str]:
        """Literals registered for a family, in registration order."""
        with self._lock:
            return list(self._buckets.get(family, {}))

    def __contains__(self, key: Tuple[str, str]) -> bool:
        family, literal = key
        with self._lock:
            return literal in self._buckets.get(family, {})

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())


_default_registry: Optional[EnumRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> EnumRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = EnumRegistry()
    return _default_registry
