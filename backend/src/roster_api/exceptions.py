"""Domain-specific exceptions for the roster API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses. Each carries the status code it maps to, and the
exception handlers in ``roster_api.middleware.error_handler`` turn them
into ``{"message": ...}`` bodies.
"""

from typing import Any


class RosterAPIError(Exception):
    """Base exception for all roster API errors."""

    status_code: int = 500

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(RosterAPIError):
    """Raised at startup when required configuration is missing or invalid."""


class InternalError(RosterAPIError):
    """Raised when the record store fails unexpectedly."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(RosterAPIError):
    """Raised for missing or malformed request fields."""

    status_code = 400


class DuplicateEmailError(RosterAPIError):
    """Raised when an account or employee email is already taken."""

    status_code = 400

    def __init__(self, email: str | None = None) -> None:
        super().__init__("Email already in use. Please use a different email.")
        # Kept out of the response body; used for logging only
        self.email = email


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(RosterAPIError):
    """Base class for resource not found errors."""

    status_code = 404


class AccountNotFoundError(NotFoundError):
    """Raised when an account cannot be found."""

    def __init__(self, account_id: str | None = None) -> None:
        details = {"account_id": str(account_id)} if account_id else {}
        super().__init__("User not found", details)


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: str | None = None) -> None:
        details = {"employee_id": str(employee_id)} if employee_id else {}
        super().__init__("Employee not found", details)


# =============================================================================
# Authentication Errors (401 / 403)
# =============================================================================


class InvalidCredentialsError(RosterAPIError):
    """Raised on login for both unknown emails and wrong passwords."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")


class UnauthorizedError(RosterAPIError):
    """Raised when a bearer token is present but cannot be verified."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid or expired token.")


class MissingTokenError(RosterAPIError):
    """Raised when a protected request carries no bearer token at all."""

    status_code = 403

    def __init__(self) -> None:
        super().__init__("No token provided, access denied.")


# =============================================================================
# Token Errors (raised by TokenService, mapped to UnauthorizedError)
# =============================================================================


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenInvalidError(TokenError):
    """Raised when a token signature or structure is invalid."""


class TokenExpiredError(TokenError):
    """Raised when a token is past its expiry."""
