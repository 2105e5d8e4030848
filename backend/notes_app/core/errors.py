"""Error Hierarchy — typed, categorized exceptions for every notes failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError and NotFoundError are recoverable by the caller (400/404)
    - InternalError wraps unexpected failures (500), original message kept in details
    - to_response() produces the REST envelope {"error", "code", "details"}

Design Decisions:
    - Single hierarchy with NotesError base: one FastAPI handler catches all
    - details is a plain dict: the transport decides whether to expose it
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class NotesError(Exception):
    """Base exception for all notes errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details or {}

    def to_response(self, include_details: bool = True) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": self.message,
            "code": self.code,
            "details": dict(self.details) if include_details else {},
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(NotesError):
    """Note input is malformed."""
    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        merged = dict(details or {})
        if field is not None:
            merged.setdefault("field", field)
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, merged,
        )
        self.field = field


class NotFoundError(NotesError):
    """Referenced note does not exist."""
    def __init__(self, note_id: str, resource_type: str = "Note"):
        super().__init__(
            f"{resource_type} with id '{note_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404, {"id": note_id},
        )
        self.note_id = note_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(NotesError):
    """Unexpected failure inside an operation."""
    def __init__(self, message: str, original: BaseException | None = None):
        details = {"originalError": str(original)} if original is not None else {}
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500, details,
        )
        self.original = original
