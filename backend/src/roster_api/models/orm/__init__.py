"""SQLAlchemy ORM models package."""

from roster_api.models.orm.base import Base
from roster_api.models.orm.account import AccountORM
from roster_api.models.orm.employee import EmployeeORM

__all__ = [
    "Base",
    "AccountORM",
    "EmployeeORM",
]
