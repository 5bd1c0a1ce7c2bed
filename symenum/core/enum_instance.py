"""Enumeration Instance: one immutable singleton value of an EnumType.

Invariants:
    - Exactly one EnumInstance per (EnumType, value); built only by EnumType's pool
    - Instance == instance is identity; instance == str compares content
    - Predicates are a tag (index) comparison against the type's predicate table
    - No attribute can be set or deleted after construction

Design Decisions:
    - One class for every value, tagged by index: no per-value subclasses
    - hash(instance) == hash(value): consistent with string equality
    - copy/deepcopy return self: copies would break the singleton guarantee
"""

from typing import TYPE_CHECKING

from symenum.core.domain_types import PREDICATE_PREFIX

if TYPE_CHECKING:
    from symenum.core.enum_type import EnumType


class EnumInstance:
    """A single value of an enumeration type."""

    __slots__ = ("_enum_type", "_index", "_value")

    def __init__(self, enum_type: "EnumType", index: int, value: str):
        object.__setattr__(self, "_enum_type", enum_type)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> str:
        return self._value

    @property
    def enum_type(self) -> "EnumType":
        return self._enum_type

    def check(self, predicate: str) -> bool:
        """True iff `predicate` is this instance's own `is_<value>` name."""
        return self._enum_type._predicate_table.get(predicate) == self._index

    # ─── Predicate attributes ───────────────────────────────────

    def __getattr__(self, name: str) -> bool:
        # Only reached when normal lookup fails; slots may be unset mid-construction.
        if name.startswith(PREDICATE_PREFIX):
            try:
                table = object.__getattribute__(self, "_enum_type")._predicate_table
            except AttributeError:
                table = {}
            if name in table:
                return table[name] == self._index
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __dir__(self):
        return [*super().__dir__(), *self._enum_type.predicates()]

    # ─── Immutability ───────────────────────────────────────────

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # ─── Equality ───────────────────────────────────────────────

    def __eq__(self, other):
        if isinstance(other, EnumInstance):
            return other is self
        if isinstance(other, str):
            return other == self._value
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"<{self._enum_type.name}.{self._value}>"
