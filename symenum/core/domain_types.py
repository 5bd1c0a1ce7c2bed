"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ValueSet is a sorted tuple of distinct alphanumeric strings, never empty
    - CanonicalKey is a ValueSet joined by KEY_SEPARATOR
    - KEY_SEPARATOR can never occur inside a valid value

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Tuple for ValueSet: hashable and read-only, safe to hand out to callers
"""

import re
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ValueSet = NewType("ValueSet", tuple[str, ...])
CanonicalKey = NewType("CanonicalKey", str)


# ─── Constants ───────────────────────────────────────────────────

KEY_SEPARATOR = chr(28)  # ASCII file separator
PREDICATE_PREFIX = "is_"
VALUE_PATTERN = re.compile(r"[A-Za-z0-9]+", re.ASCII)
DEFAULT_TYPE_NAME_PREFIX = "Enum"


def predicate_name(value: str) -> str:
    return PREDICATE_PREFIX + value
