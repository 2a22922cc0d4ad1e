"""Error Hierarchy: typed, categorized exceptions for all Task Manager failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the `{"message": ...}` body clients already rely on
    - Task not-found and not-owned share one error so callers cannot tell them apart
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from task_manager.core.domain_types import Message


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    document_id: str | None = None
    user_email: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskManagerError(Exception):
    """Base exception for all Task Manager errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the logging `extra` argument."""
        return {
            "error_code": self.code,
            "document_id": self.context.document_id,
            "user_email": self.context.user_email,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class AccessDeniedError(TaskManagerError):
    """Bearer token missing, malformed, tampered with, or expired."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            Message.ACCESS_DENIED.value, "ACCESS_DENIED",
            ErrorCategory.AUTHORIZATION, ErrorSeverity.WARNING, context, 403,
        )
        self.reason = reason


class TaskNotFoundError(TaskManagerError):
    """No task matched both the identifier and the caller's email."""
    def __init__(self, task_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.document_id = task_id
        super().__init__(
            Message.TASK_NOT_FOUND.value, "TASK_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, ctx, 404,
        )


class DocumentWriteError(TaskManagerError):
    """A field update cannot be applied to the stored document."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            message, "WRITE_REJECTED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.path = path


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskManagerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
