"""Error Hierarchy — typed, categorized exceptions for Kaprekar failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors raise synchronously at the offending computation, never recovered in core/
    - to_dict() produces the structured envelope the shell attaches to its error logs

Design Decisions:
    - Single hierarchy with KaprekarError base: the batch driver catches one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    start_value: int | None = None
    iteration: int | None = None


class KaprekarError(Exception):
    """Base exception for all Kaprekar errors."""

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
                    "start_value": self.context.start_value,
                    "iteration": self.context.iteration,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class InvalidInputError(KaprekarError):
    """Value is not a four-digit integer."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Value must be a four-digit number, got {value!r}",
            "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.value = value
