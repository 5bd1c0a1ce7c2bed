"""Factory: public entry point turning raw values into an EnumType.

Invariants:
    - create() with equal value sets returns the identical EnumType per registry
    - Validation failures leave the registry untouched
    - The default registry is built once per process from Settings, under a lock

Design Decisions:
    - Optional registry argument: isolated registries without touching global state
    - Double-checked module global for the default registry: lru_cache does not make the first build atomic
    - Construction errors logged at DEBUG: they are caller mistakes, raised immediately
"""

import logging
import threading
from collections.abc import Iterable

from symenum.config import get_settings
from symenum.core.canonicalize import canonicalize
from symenum.core.enum_type import EnumType
from symenum.core.errors import SymEnumError
from symenum.core.registry import TypeRegistry
from symenum.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


_default_registry: TypeRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> TypeRegistry:
    """Return the process-wide registry, building it from Settings on first use."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _default_registry_lock:
        if _default_registry is None:
            settings = get_settings()
            _default_registry = TypeRegistry(settings.type_name_prefix, settings.eager_pool)
        return _default_registry


def reset_default_registry() -> None:
    """Forget the process-wide registry; the next create() builds a new one."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


def create(values: Iterable[object], *, registry: TypeRegistry | None = None) -> EnumType:
    """Return the enumeration type for the set of `values`.

    Values are stringified, deduplicated and sorted; two calls whose values
    form the same set return the same type.

    Raises:
        EmptyValueSetError: no values given.
        InvalidCharacterError: a value is not ASCII alphanumeric.
        RegistryClosedError: `registry` was closed.
    """
    try:
        value_set = canonicalize(values)
    except SymEnumError as e:
        logger.debug(
            "Rejected enum values: %s", e.message, extra={"error_code": e.code},
        )
        raise
    if registry is None:
        registry = get_default_registry()
    return registry.get_or_create(value_set)


def configure_logging() -> logging.Handler:
    """Install the symenum log handler using SYMENUM_LOG_LEVEL / SYMENUM_LOG_FORMAT."""
    settings = get_settings()
    return setup_logging(settings.log_level, settings.log_format)
