"""Custom exception classes for the diet plan service.

The plan generator itself never raises: it degrades to fallback pools and
placeholder meals. These exceptions belong to the layers around it (catalog
loading, profile validation, the database and the HTTP API) and are turned
into JSON error bodies by `core.error_handlers`.
"""

from typing import Optional, Any, Dict


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


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class ProfileValidationError(ValidationError):
    """Raised when a submitted profile fails the questionnaire checks.

    Args:
        errors: Mapping of profile field name to its error message.
    """

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Profile validation failed")
        self.details = {"fields": dict(errors)}
        self.errors = dict(errors)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class InsufficientDataError(AppException):
    """Exception raised when there is not enough data to build a plan."""

    def __init__(self, message: str, minimum_required: Optional[int] = None):
        details = {"minimum_required": minimum_required} if minimum_required else {}
        super().__init__(message, status_code=400, details=details)


class CatalogLoadError(AppException):
    """Raised when the food dataset file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to load food dataset from '{path}': {reason}",
            status_code=500,
            details={"path": path},
        )
