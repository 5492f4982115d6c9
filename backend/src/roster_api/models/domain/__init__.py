"""Domain models package."""

from roster_api.models.domain.account import Gender
from roster_api.models.domain.employee import EmployeeRole

__all__ = [
    "EmployeeRole",
    "Gender",
]
