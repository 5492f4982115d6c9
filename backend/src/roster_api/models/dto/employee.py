"""Employee DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from roster_api.constants.validation import (
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    EMPLOYEE_AGE_MAX,
    EMPLOYEE_AGE_MIN,
    JOINING_DATE_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)
from roster_api.models.domain.account import Gender
from roster_api.models.domain.employee import EmployeeRole
from roster_api.models.dto.base import ApiModel


class EmployeeCreate(ApiModel):
    """DTO for creating an employee.

    There is deliberately no ``admin_id`` field: ownership is taken from the
    authenticated caller and any client-supplied value is ignored.
    """

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    gender: Gender
    age: int = Field(ge=EMPLOYEE_AGE_MIN, le=EMPLOYEE_AGE_MAX)
    role: EmployeeRole
    phone_number: str = Field(min_length=1, max_length=PHONE_MAX_LENGTH)
    joining_date: str = Field(min_length=1, max_length=JOINING_DATE_MAX_LENGTH)


class EmployeeUpdate(ApiModel):
    """DTO for updating an employee. Ownership cannot be changed."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)
    gender: Gender | None = None
    age: int | None = Field(default=None, ge=EMPLOYEE_AGE_MIN, le=EMPLOYEE_AGE_MAX)
    role: EmployeeRole | None = None
    phone_number: str | None = Field(default=None, min_length=1, max_length=PHONE_MAX_LENGTH)
    joining_date: str | None = Field(default=None, min_length=1, max_length=JOINING_DATE_MAX_LENGTH)


class EmployeeResponse(ApiModel):
    """Employee response DTO."""

    id: UUID = Field(alias="_id")
    name: str
    email: str
    gender: Gender
    age: int
    role: EmployeeRole
    phone_number: str
    joining_date: str
    admin_id: UUID
    created_at: datetime
    updated_at: datetime
