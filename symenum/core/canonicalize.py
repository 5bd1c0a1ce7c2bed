"""Canonicalizer: turns raw user input into a validated ValueSet and its cache key.

Invariants:
    - Output depends only on the set of stringified inputs (order and duplicates ignored)
    - Empty check runs before the character check
    - Pure functions, no side effects

Design Decisions:
    - str() on every input: any object with a string form can name a value
    - A bare str argument is one value, never a sequence of characters
"""

from collections.abc import Iterable

from symenum.core.domain_types import (
    CanonicalKey, ValueSet, KEY_SEPARATOR, VALUE_PATTERN,
)
from symenum.core.errors import EmptyValueSetError, InvalidCharacterError


def canonicalize(raw_values: Iterable[object]) -> ValueSet:
    """Stringify, deduplicate and sort raw values, then validate the result.

    Raises:
        EmptyValueSetError: nothing left after deduplication.
        InvalidCharacterError: a value is empty or not ASCII alphanumeric.
    """
    if isinstance(raw_values, str):
        raw_values = (raw_values,)
    values = sorted({str(v) for v in raw_values})
    if not values:
        raise EmptyValueSetError()
    invalid = [v for v in values if not VALUE_PATTERN.fullmatch(v)]
    if invalid:
        raise InvalidCharacterError(invalid)
    return ValueSet(tuple(values))


def canonical_key(value_set: ValueSet) -> CanonicalKey:
    return CanonicalKey(KEY_SEPARATOR.join(value_set))
