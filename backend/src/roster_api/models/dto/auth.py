"""Authentication DTOs."""

from uuid import UUID

from pydantic import Field

from roster_api.models.dto.base import ApiModel


class LoginRequest(ApiModel):
    """Login request.

    Both fields are optional at the schema level so that a missing field
    is reported with the login-specific message rather than a generic
    validation error.
    """

    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=1024)


class LoginResponse(ApiModel):
    """Successful login response."""

    token: str
    user_id: UUID
    username: str
