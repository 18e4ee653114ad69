"""Error Hierarchy — typed, categorized exceptions for response construction.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business errors (400-level) are rendered into an error envelope, never re-raised
    - SchemaInferenceError is fatal to the response being built
    - Transport failures are plain OSError and are never wrapped here

Design Decisions:
    - Single hierarchy with ResponseCoreError base: one FastAPI handler catches all
    - error_message() is what lands in the envelope's errorMessage field
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    USER_REQUEST = "user_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SCHEMA_INFERENCE = "schema_inference"
    INTERNAL = "internal"


class ResponseCoreError(Exception):
    """Base exception for all response core errors."""

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

    def error_message(self) -> str:
        """Client-facing text for the envelope's errorMessage field."""
        return self.message


# ─── Business Errors (400-level) ────────────────────────────────

class UserRequestError(ResponseCoreError):
    """Request rejected by endpoint logic, surfaced as an error envelope."""
    def __init__(self, message: str, http_status: int = 400):
        super().__init__(
            message, "USER_REQUEST_ERROR", ErrorCategory.USER_REQUEST,
            ErrorSeverity.ERROR, http_status,
        )


class ResourceNotFoundError(ResponseCoreError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Construction Errors (500-level) ────────────────────────────

class SchemaInferenceError(ResponseCoreError):
    """Body flagged as JSON could not be parsed, so no schema header exists."""
    def __init__(self, message: str, position: int | None = None):
        super().__init__(
            f"Cannot infer JSON schema: {message}",
            "SCHEMA_INFERENCE_FAILED", ErrorCategory.SCHEMA_INFERENCE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.position = position
