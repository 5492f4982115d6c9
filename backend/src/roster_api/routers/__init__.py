"""API routers package."""

from roster_api.routers import employees, users

__all__ = [
    "employees",
    "users",
]
