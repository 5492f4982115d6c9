"""Security package."""

from roster_api.security.auth import CurrentAdmin, get_current_admin
from roster_api.security.password import PasswordService, get_password_service
from roster_api.security.tokens import TokenService

__all__ = [
    "CurrentAdmin",
    "PasswordService",
    "TokenService",
    "get_current_admin",
    "get_password_service",
]
