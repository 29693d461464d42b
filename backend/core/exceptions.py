"""
Exception hierarchy for the LearnHub application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and
carry the HTTP status the API layer renders them with.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LearnHubException(Exception):
    """Base exception for all LearnHub application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(LearnHubException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AuthenticationError(LearnHubException):
    """Raised when a request carries no usable credentials."""

    status_code = 401


class ForbiddenError(LearnHubException):
    """Raised when an authenticated user may not perform an operation."""

    status_code = 403


class NotFoundError(LearnHubException):
    """Raised when a referenced resource does not exist."""

    status_code = 404

    def __init__(
        self,
        message: str,
        resource_id: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            message: Error message, e.g. "Lecture not found"
            resource_id: ID of the missing resource
            details: Additional context
        """
        details = details or {}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message, details)


class ConflictError(LearnHubException):
    """Raised when a write would violate a uniqueness rule."""

    status_code = 409


class ServiceError(LearnHubException):
    """Raised when an operation fails for reasons the caller cannot fix."""

    status_code = 500
