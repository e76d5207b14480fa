"""
Client Literal Enum (clenum) Package

Java-style enums for a client library, backed by the string literals the
remote API sends over the wire.

ARCHITECTURAL GUARANTEE:
------------------------
    - One instance per (family, literal), process-wide
    - Unknown literals are admitted, never rejected
    - Equality and ordering ignore case

This package performs no network I/O and keeps no state across runs.
"""

from .literal import EnumDeclarationError, LiteralEnum, optional_equals
from .registry import EnumRegistry, FamilyConflictError, get_registry
from .transforms import EnumTransform, enum_transform

__version__ = "0.1.0"

__all__ = [
    "EnumDeclarationError",
    "EnumRegistry",
    "EnumTransform",
    "FamilyConflictError",
    "LiteralEnum",
    "enum_transform",
    "get_registry",
    "optional_equals",
]
