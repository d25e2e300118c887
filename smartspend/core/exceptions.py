"""
Exception hierarchy for the SmartSpend API.

Raised by the domain, use cases and repositories; translated into HTTP
responses only at the API boundary (see smartspend.api.error_handlers).
Every error carries a user-facing message that is safe to return to the
client, plus an internal message for logs.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SmartSpendError(Exception):
    """Base exception for all SmartSpend errors."""

    default_user_message = "An error occurred. Please try again."

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(SmartSpendError):
    """Raised when input is malformed, missing or out of range."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any):
        # Validation messages are written for the client already
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)
        self.field = field


class AuthenticationError(SmartSpendError):
    """Raised for bad credentials or a missing, invalid or expired token."""

    default_user_message = "Not authenticated"


class NotFoundError(SmartSpendError):
    """Raised when a resource does not exist or is not owned by the requester."""

    default_user_message = "Resource not found"


class DuplicateIdentityError(SmartSpendError):
    """Raised when signing up with an email that is already registered."""

    default_user_message = "An account with this email already exists"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class RepositoryError(SmartSpendError):
    """Raised when the persistent store fails."""

    default_user_message = "Internal server error"
