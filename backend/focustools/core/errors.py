"""Error Hierarchy — typed, categorized exceptions for all FocusTools failure modes.

Invariants:
    - Every error has a category (ErrorCategory), severity (ErrorSeverity) and http_status
    - to_response() always produces {"error": <category>, "message": <detail>}
    - Client errors (400/404) are recoverable; store errors (500) are critical

Design Decisions:
    - Single hierarchy with FocusToolsError base: FastAPI global handler catches all
      (ADR: uniform error shape across every endpoint)
    - Category values are the literal strings clients match on
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Client-facing error categories (the `error` field of every error body)."""
    VALIDATION = "Validation error"
    TASK_NOT_FOUND = "Task not found"
    SERVER = "Server error"


class FocusToolsError(Exception):
    """Base exception for all FocusTools errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.category.value, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(FocusToolsError):
    """Request input failed validation."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class TaskNotFoundError(FocusToolsError):
    """No task for the given identifier (or the identifier is malformed)."""
    def __init__(self, message: str, task_id: str | None = None):
        super().__init__(
            message, "TASK_NOT_FOUND", ErrorCategory.TASK_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.task_id = task_id

    @classmethod
    def for_id(cls, task_id: str) -> "TaskNotFoundError":
        return cls(f"Task with ID {task_id} not found", task_id)

    @classmethod
    def malformed(cls, task_id: str) -> "TaskNotFoundError":
        return cls("Invalid task ID format", task_id)


# ─── Store Errors (500-level) ───────────────────────────────────

class DatabaseError(FocusToolsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.SERVER,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
