"""Custom exception classes for the application.

Routers and services raise these; `core.error_handlers` turns them into
JSON error responses with the matching HTTP status.
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
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'User', 'Workout').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ConflictError(AppException):
    """Raised when a unique value (e.g. a username) is already taken."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class AuthenticationError(AppException):
    """Raised when login credentials do not match a stored user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, status_code=401)


class IncompleteProfileError(AppException):
    """Raised when body metrics are requested for a user missing profile data."""

    def __init__(self, required: List[str]):
        """Initialize incomplete profile error.

        Args:
            required: Profile fields needed for the calculation.
        """
        super().__init__(
            "Missing required data for body metrics calculation",
            status_code=400,
            details={"required": required},
        )


class DatabaseError(AppException):
    """Raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Raised when a required setting (such as an API key) is missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=503, details=details)


class AIServiceError(AppException):
    """Raised when the completion API fails or returns unusable content."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize AI service error.

        Args:
            message: Error message.
            operation: Coach operation that failed (e.g., 'workout_plan').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
