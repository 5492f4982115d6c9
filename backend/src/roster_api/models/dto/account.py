"""Account DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from roster_api.constants.validation import (
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_BYTES,
    PHONE_MAX_LENGTH,
)
from roster_api.models.domain.account import Gender
from roster_api.models.dto.base import ApiModel


class AccountCreate(ApiModel):
    """Registration request."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)
    phone_number: str = Field(min_length=1, max_length=PHONE_MAX_LENGTH)
    gender: Gender

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        """Reject passwords bcrypt cannot hash in full."""
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class AccountUpdate(ApiModel):
    """Account update request.

    Every field is optional and replaces the stored value as sent. A
    ``password`` sent here is written to the stored secret without hashing.
    """

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    password: str | None = Field(default=None, min_length=1)
    phone_number: str | None = Field(default=None, min_length=1, max_length=PHONE_MAX_LENGTH)
    gender: Gender | None = None


class AccountResponse(ApiModel):
    """Account response DTO. Never includes the password secret."""

    id: UUID = Field(alias="_id")
    name: str
    email: str
    phone_number: str
    gender: Gender
    created_at: datetime
    updated_at: datetime
