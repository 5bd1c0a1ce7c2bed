"""symenum: fast, immutable enumeration types built at runtime.

Invariants:
    - Importing the package never configures logging or reads the environment
    - Public names re-exported explicitly (no star exports)

Design Decisions:
    - create() is the single entry point; EnumType/EnumInstance exported for isinstance checks
"""

from symenum.core.enum_instance import EnumInstance
from symenum.core.enum_type import EnumType
from symenum.core.errors import (
    SymEnumError,
    EmptyValueSetError,
    InvalidCharacterError,
    InvalidValueError,
    RegistryClosedError,
)
from symenum.core.registry import TypeRegistry, registry_context
from symenum.factory import create, get_default_registry, reset_default_registry, configure_logging

__all__ = [
    "create",
    "configure_logging",
    "EnumType",
    "EnumInstance",
    "TypeRegistry",
    "registry_context",
    "get_default_registry",
    "reset_default_registry",
    "SymEnumError",
    "EmptyValueSetError",
    "InvalidCharacterError",
    "InvalidValueError",
    "RegistryClosedError",
]

__version__ = "0.2.3"
