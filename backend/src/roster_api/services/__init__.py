"""Services package."""

from roster_api.services.account_service import AccountService
from roster_api.services.auth_service import AuthService
from roster_api.services.employee_service import EmployeeService

__all__ = [
    "AccountService",
    "AuthService",
    "EmployeeService",
]
