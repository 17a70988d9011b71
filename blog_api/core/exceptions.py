"""Exception classes for the blog API.

Use cases raise these; the API layer maps each one to an HTTP status.
"""

from typing import Any, Dict, Optional


class BlogApiError(Exception):
    """Base exception class for all blog API errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AuthenticationError(BlogApiError):
    """Missing, invalid or expired credentials."""
    pass


class AuthorizationError(BlogApiError):
    """Authenticated, but not allowed to act on the target resource."""
    pass


class ValidationError(BlogApiError):
    """Malformed or missing required input."""
    pass


class ConflictError(ValidationError):
    """Input collides with an existing entity (e.g. duplicate email)."""
    pass


class NotFoundError(BlogApiError):
    """No entity exists at the given identifier."""
    pass


class PersistenceError(BlogApiError):
    """The document store failed to complete an operation."""
    pass
