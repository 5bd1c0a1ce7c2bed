"""Error Hierarchy: typed, categorized exceptions for all symenum failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and lookup errors also subclass ValueError; lifecycle errors subclass RuntimeError
    - to_dict() produces a flat envelope suitable for structured logging
    - No partial state is left behind when any of these is raised
    - A caller-supplied ErrorContext is copied, never filled in place

Design Decisions:
    - Single hierarchy with SymEnumError base: callers catch one type for all library failures
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Builtin mixins (ValueError, RuntimeError): plain `except ValueError` keeps working
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    LOOKUP = "lookup"
    LIFECYCLE = "lifecycle"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    enum_type: str | None = None
    value: str | None = None
    values: tuple[str, ...] | None = None
    debug_info: dict[str, Any] | None = None


class SymEnumError(Exception):
    """Base exception for all symenum errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "enum_type": self.context.enum_type,
                    "value": self.context.value,
                    "values": list(self.context.values) if self.context.values else None,
                },
            }
        }


# ─── Construction Errors ────────────────────────────────────────

class EmptyValueSetError(SymEnumError, ValueError):
    """Canonicalized value set is empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Enumeration has no values",
            "EMPTY_VALUE_SET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class InvalidCharacterError(SymEnumError, ValueError):
    """One or more values contain characters outside [A-Za-z0-9]."""
    def __init__(self, invalid: list[str], context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), values=tuple(invalid))
        shown = ", ".join(repr(v) for v in invalid)
        super().__init__(
            f"Values must be alphanumeric: {shown}",
            "INVALID_CHARACTER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.invalid = list(invalid)


# ─── Lookup Errors ──────────────────────────────────────────────

class InvalidValueError(SymEnumError, ValueError):
    """Requested value is not a member of the enumeration type."""
    def __init__(
        self, value: str, enum_type: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = replace(context or ErrorContext(), value=value, enum_type=enum_type)
        super().__init__(
            f"Invalid value: '{value}'",
            "INVALID_VALUE", ErrorCategory.LOOKUP,
            ErrorSeverity.WARNING, ctx,
        )
        self.value = value


# ─── Lifecycle Errors ───────────────────────────────────────────

class RegistryClosedError(SymEnumError, RuntimeError):
    """Type registry was torn down and can no longer create types."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Type registry is closed",
            "REGISTRY_CLOSED", ErrorCategory.LIFECYCLE,
            ErrorSeverity.CRITICAL, context,
        )
