"""Data Transfer Objects package."""

from roster_api.models.dto.account import AccountCreate, AccountResponse, AccountUpdate
from roster_api.models.dto.auth import LoginRequest, LoginResponse
from roster_api.models.dto.base import MessageResponse
from roster_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountUpdate",
    "EmployeeCreate",
    "EmployeeResponse",
    "EmployeeUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
]
