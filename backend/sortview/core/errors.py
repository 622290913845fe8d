"""Error Hierarchy — typed, categorized exceptions for all SortView failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidInputError is the only domain error: rejected with no state change
    - Empty results, out-of-range pages, unknown filter keys, stale ids are NOT errors
    - to_response() carries a top-level human-readable `message` for the client

Design Decisions:
    - Single hierarchy with SortViewError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    filter_key: str | None = None
    item_id: int | None = None
    debug_info: dict[str, Any] | None = None


class SortViewError(Exception):
    """Base exception for all SortView errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "filter_key": self.context.filter_key,
                    "item_id": self.context.item_id,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(SortViewError):
    """Malformed input shape: wrong types, non-integer or unknown ids."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StateNotInitializedError(SortViewError):
    """View state requested before application startup completed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "View state is not initialized",
            "STATE_NOT_INITIALIZED", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
