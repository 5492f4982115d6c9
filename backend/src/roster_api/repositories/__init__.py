"""Repositories package."""

from roster_api.repositories.account_repository import AccountRepository
from roster_api.repositories.base import BaseRepository
from roster_api.repositories.employee_repository import EmployeeRepository

__all__ = [
    "AccountRepository",
    "BaseRepository",
    "EmployeeRepository",
]
