"""Centralized dependency injection factories for FastAPI."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roster_api.config import Settings, get_settings
from roster_api.database import get_db
from roster_api.security.auth import get_token_service
from roster_api.security.tokens import TokenService
from roster_api.services.account_service import AccountService
from roster_api.services.auth_service import AuthService
from roster_api.services.employee_service import EmployeeService


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db, token_service)


def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    """Get AccountService instance."""
    return AccountService(db)


def get_employee_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db, enforce_ownership=settings.enforce_employee_ownership)
