"""Error Hierarchy - typed, categorized exceptions for all sign-up failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Anticipated domain failures travel as Failure outcomes, not exceptions;
      the exceptions below are either renderings of those outcomes (422)
      or programmer/infrastructure faults (500-level)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SignupError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    step_name: str | None = None
    failure_tag: str | None = None


class SignupError(Exception):
    """Base exception for all sign-up service errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# --- Domain Errors (400-level) -----------------------------------------------

class UnprocessableEntityError(SignupError):
    """Request parameters were well-formed but failed domain validation."""
    def __init__(
        self,
        details: dict[str, list[str]],
        message: str = "Validation failed",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNPROCESSABLE_ENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = {
            name: list(messages) for name, messages in self.details.items()
        }
        return response


# --- Programmer Errors (500-level) -------------------------------------------

class InvalidStateError(SignupError):
    """Variant-specific accessor called on the wrong Outcome variant."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_STATE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class UnhandledOutcomeError(SignupError):
    """Failure outcome has no registered handler for its tag."""
    def __init__(self, tag: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.failure_tag = str(getattr(tag, "value", tag))
        super().__init__(
            f"No failure handler registered for tag {ctx.failure_tag!r}",
            "UNHANDLED_OUTCOME", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.tag = tag


class StepContractError(SignupError):
    """Pipeline step returned something other than Success or Failure."""
    def __init__(
        self, step_name: str, returned: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.step_name = step_name
        super().__init__(
            f"Step {step_name!r} returned {type(returned).__name__}; "
            "expected Success or Failure",
            "STEP_CONTRACT_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.step_name = step_name


# --- Infrastructure Errors (500-level) ---------------------------------------

class DatabaseError(SignupError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
