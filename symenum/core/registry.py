"""Type Registry: get-or-create cache mapping CanonicalKey → EnumType.

Invariants:
    - At most one EnumType per CanonicalKey for the registry's lifetime
    - Entries are only ever added; close() is the single way to drop them
    - A type is published only after it is fully constructed (all-or-nothing)
    - get_or_create canonicalizes its input: callers never need to pre-sort
    - Type names are unique within a registry: <prefix><counter>

Design Decisions:
    - Explicit registry object instead of module-level dict: isolated registries for tests
    - Lock only on the miss path; hits are a single dict lookup
    - registry_context() owns teardown so callers cannot forget close()
"""

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from symenum.core.domain_types import CanonicalKey, DEFAULT_TYPE_NAME_PREFIX
from symenum.core.canonicalize import canonicalize, canonical_key
from symenum.core.enum_type import EnumType
from symenum.core.errors import RegistryClosedError

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Process-wide (or context-scoped) store of enumeration types."""

    def __init__(
        self, type_name_prefix: str = DEFAULT_TYPE_NAME_PREFIX, eager_pool: bool = False,
    ):
        self._type_name_prefix = type_name_prefix
        self._eager_pool = eager_pool
        self._types: dict[CanonicalKey, EnumType] = {}
        self._counter = itertools.count()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get_or_create(self, values: Iterable[object]) -> EnumType:
        """Return the EnumType registered for the set of `values`, creating it on first use.

        `values` is canonicalized first, so any order or duplicate count of the
        same set resolves to the same type.

        Raises:
            EmptyValueSetError: no values given.
            InvalidCharacterError: a value is not ASCII alphanumeric.
            RegistryClosedError: close() was already called.
        """
        value_set = canonicalize(values)
        key = canonical_key(value_set)
        enum_type = self._types.get(key)
        if enum_type is not None:
            return enum_type
        with self._lock:
            if self._closed:
                raise RegistryClosedError()
            enum_type = self._types.get(key)
            if enum_type is None:
                name = f"{self._type_name_prefix}{next(self._counter)}"
                enum_type = EnumType(name, key, value_set, eager=self._eager_pool)
                self._types[key] = enum_type
                logger.debug(
                    "Created enum type %s", name,
                    extra={"enum_type": name, "value_count": len(value_set)},
                )
            return enum_type

    def get(self, key: CanonicalKey) -> EnumType | None:
        return self._types.get(key)

    def close(self) -> None:
        """Tear down the registry. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            count = len(self._types)
            self._types.clear()
        logger.debug("Closed type registry (%d types dropped)", count)

    def __contains__(self, key: object) -> bool:
        return key in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[EnumType]:
        with self._lock:
            return iter(list(self._types.values()))


@contextmanager
def registry_context(
    type_name_prefix: str = DEFAULT_TYPE_NAME_PREFIX, eager_pool: bool = False,
) -> Iterator[TypeRegistry]:
    """Yield a fresh isolated registry, closed on exit."""
    registry = TypeRegistry(type_name_prefix, eager_pool)
    try:
        yield registry
    finally:
        registry.close()
