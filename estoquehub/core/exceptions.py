"""
Error hierarchy for EstoqueHub.

Use cases and repositories raise these; the API layer maps each class to an
HTTP status in one place (see api/error_handlers.py). Every error carries a
user-facing message that is safe to send to the client.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class EstoqueHubError(Exception):
    """Base exception for all EstoqueHub errors."""

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
# Input
# -----------------------------------------------------------------------------


class ValidationError(EstoqueHubError):
    """Raised when a request is missing fields or carries out-of-range values."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class ConflictError(EstoqueHubError):
    """Raised when a uniqueness rule (user email, per-user SKU) would be broken."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AuthError(EstoqueHubError):
    """Base exception for authentication failures."""

    default_user_message = "Not authenticated."


class TokenError(AuthError):
    """Raised when a bearer token is missing, malformed, badly signed or expired."""

    default_user_message = "Invalid or expired token."


class InvalidCredentialsError(AuthError):
    """Raised on login when the email is unknown or the password does not match."""

    default_user_message = "Invalid credentials."

    def __init__(self, message: str = "Invalid credentials"):
        # Same user message for both failure causes
        super().__init__(message, user_message=self.default_user_message)


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class DependencyError(EstoqueHubError):
    """Raised when the database rejects or fails an operation."""

    default_user_message = "Database error. Please try again."

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Internal details of unexpected exceptions are never exposed.
    """
    if isinstance(exc, EstoqueHubError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Internal server error."
