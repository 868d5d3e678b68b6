"""Error Hierarchy — typed, categorized exceptions for all Deliberate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces REST envelope; to_tool_result() produces the tool-call envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DeliberateError base: ToolDispatch and the FastAPI
      global handler both catch it (uniform error shape)
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_STATE = "invalid_state"
    INSUFFICIENT_DATA = "insufficient_data"
    RATE_LIMITED = "rate_limited"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    tool_name: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class DeliberateError(Exception):
    """Base exception for all Deliberate errors."""

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

    def details(self) -> dict:
        """Extra machine-readable fields. Overridden by subclasses."""
        return {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "tool_name": self.context.tool_name,
                    "retry_after_ms": self.context.retry_after_ms,
                },
                **self.details(),
            }
        }

    def to_tool_result(self) -> dict:
        """Convert to the tool-call envelope: {success: false, error: {...}}."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": self.http_status < 500,
            **self.details(),
        }
        if self.context.retry_after_ms is not None:
            error["retry_after_ms"] = self.context.retry_after_ms
        return {"success": False, "error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ToolValidationError(DeliberateError):
    """Tool input validation failed. Carries every violation, not just the first."""
    def __init__(
        self, violations: list[str], field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Validation failed: {'; '.join(violations)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations
        self.field = field

    def details(self) -> dict:
        return {"violations": self.violations}


class ResourceNotFoundError(DeliberateError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidStateError(DeliberateError):
    """Operation attempted on a session in the wrong state or of the wrong kind."""
    def __init__(
        self, message: str, code: str = "SESSION_NOT_ACTIVE",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.INVALID_STATE,
            ErrorSeverity.ERROR, context, 409,
        )


class ThoughtLimitReachedError(DeliberateError):
    """Thinking session already holds max_thoughts thoughts."""
    def __init__(self, max_thoughts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Thought limit reached ({max_thoughts}/{max_thoughts}). "
            "Conclude the session or start a new one.",
            "THOUGHT_LIMIT_REACHED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.max_thoughts = max_thoughts


class InsufficientDataError(DeliberateError):
    """Analysis attempted before the session holds enough data."""
    def __init__(
        self, message: str, code: str = "NO_EVALUATIONS",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.INSUFFICIENT_DATA,
            ErrorSeverity.ERROR, context, 422,
        )


class ConfidenceTooLowError(DeliberateError):
    """Recommendation confidence below the caller's threshold."""
    def __init__(
        self, confidence: float, min_confidence: float,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Confidence level ({confidence:.2f}) is below minimum "
            f"required ({min_confidence:.2f})",
            "CONFIDENCE_TOO_LOW", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 422,
        )
        self.confidence = confidence
        self.min_confidence = min_confidence

    def details(self) -> dict:
        return {
            "confidence": round(self.confidence, 4),
            "min_confidence": self.min_confidence,
        }


class RateLimitedError(DeliberateError):
    """Advisory rate limit exceeded for an identifier."""
    def __init__(
        self, identifier: str, retry_after_ms: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Rate limit exceeded for '{identifier}'. "
            f"Try again in {max(1, -(-retry_after_ms // 1000))} seconds.",
            "RATE_LIMITED", ErrorCategory.RATE_LIMITED,
            ErrorSeverity.WARNING, ctx, 429,
        )
        self.identifier = identifier


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DeliberateError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
