"""
Domain exceptions for the Jobly API.

Raised by the SQL builders and the CRUD layer at the point of detection.
The HTTP layer (app/api/errors.py) maps each class to a status code.
"""

from typing import Optional


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInput(JoblyError):
    """Malformed or missing caller data (empty update, bad filter range)."""
    status_code = 400


class NotFound(JoblyError):
    """No entity matches the given key."""
    status_code = 404


class DuplicateResource(JoblyError):
    """A uniqueness constraint was violated on create."""
    status_code = 400


class Unauthorized(JoblyError):
    """Caller is not logged in, or lacks the admin role."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[dict] = None):
        super().__init__(message, details)
