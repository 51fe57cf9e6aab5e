"""Custom exception classes for the application.

Every error the service raises on purpose derives from `AppException`, which
carries the HTTP status and a details payload rendered by
`core.error_handlers`.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Food', 'Scenario').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when user supplied metrics fall outside their domains.

    All violations are reported together so a form can show them at once.
    """

    def __init__(self, message: str, violations: Optional[List[str]] = None, field: Optional[str] = None):
        details: Dict[str, Any] = {}
        if violations:
            details["violations"] = list(violations)
        if field:
            details["field"] = field
        super().__init__(message, status_code=400, details=details)


class UnsupportedValueError(AppException):
    """Raised when an enum-backed value (activity level, goal) is unknown.

    This signals a caller or schema bug, so it maps to a server error rather
    than a client error.
    """

    def __init__(self, field: str, value: Any):
        message = f"Unsupported {field}: {value!r}"
        super().__init__(message, status_code=500, details={"field": field, "value": str(value)})
