"""Enumeration Type: one concrete enum, owner of its values and singleton pool.

Invariants:
    - values() is the canonical ValueSet; predicates()[i] == "is_" + values()[i]
    - The instance pool is built exactly once, all values together, under _pool_lock
    - After the pool is published it is never mutated; reads take no lock
    - new() never creates an instance outside the pool

Design Decisions:
    - Lazy-once pool by default (matches first-use construction); eager when requested
    - Double-checked build: readers test _pool before touching the lock
    - Predicate table (name → index) built at construction, shared by all instances
"""

import threading
from collections.abc import Iterator

from symenum.core.domain_types import CanonicalKey, ValueSet, predicate_name
from symenum.core.enum_instance import EnumInstance
from symenum.core.errors import InvalidValueError


class EnumType:
    """A closed set of symbolic values created from a ValueSet."""

    def __init__(
        self, name: str, key: CanonicalKey, values: ValueSet, eager: bool = False,
    ):
        self._name = name
        self._key = key
        self._values = values
        self._members = frozenset(values)
        self._predicates = tuple(predicate_name(v) for v in values)
        self._predicate_table = {p: i for i, p in enumerate(self._predicates)}
        self._pool: dict[str, EnumInstance] | None = None
        self._pool_lock = threading.Lock()
        if eager:
            self._ensure_pool()

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> CanonicalKey:
        return self._key

    @property
    def pool_built(self) -> bool:
        return self._pool is not None

    def new(self, value: object) -> EnumInstance:
        """Return the singleton instance for `value`.

        Raises:
            InvalidValueError: `value` is not one of values().
        """
        pool = self._ensure_pool()
        key = str(value)
        try:
            return pool[key]
        except KeyError:
            raise InvalidValueError(key, enum_type=self._name) from None

    __call__ = new

    def values(self) -> tuple[str, ...]:
        return self._values

    def predicates(self) -> tuple[str, ...]:
        return self._predicates

    def predicate_map(self) -> dict[str, str]:
        """Map each value to its predicate name."""
        return dict(zip(self._values, self._predicates))

    def _ensure_pool(self) -> dict[str, EnumInstance]:
        pool = self._pool
        if pool is not None:
            return pool
        with self._pool_lock:
            if self._pool is None:
                self._pool = {
                    v: EnumInstance(self, i, v) for i, v in enumerate(self._values)
                }
            return self._pool

    def __contains__(self, value: object) -> bool:
        if isinstance(value, EnumInstance):
            return value.enum_type is self
        return str(value) in self._members

    def __iter__(self) -> Iterator[EnumInstance]:
        pool = self._ensure_pool()
        return iter([pool[v] for v in self._values])

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"<EnumType {self._name} [{', '.join(self._values)}]>"
