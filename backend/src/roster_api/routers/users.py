"""Account router: registration, login and account management."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from roster_api.dependencies import get_account_service, get_auth_service
from roster_api.models.dto.account import AccountCreate, AccountResponse, AccountUpdate
from roster_api.models.dto.auth import LoginRequest, LoginResponse
from roster_api.models.dto.base import MessageResponse
from roster_api.security.rate_limit import (
    AUTH_LOGIN_LIMIT,
    AUTH_REGISTER_LIMIT,
    get_real_client_ip,
    limiter,
)
from roster_api.services.account_service import AccountService
from roster_api.services.auth_service import AuthService

router = APIRouter()


@router.post("/create", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_REGISTER_LIMIT)
async def create_account(
    request: Request,
    data: AccountCreate,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AccountResponse:
    """Register a new admin account.

    The response never includes the password.
    """
    return await service.register(data, ip_address=get_real_client_ip(request))


@router.post("/login", response_model=LoginResponse)
@limiter.limit(AUTH_LOGIN_LIMIT)
async def login(
    request: Request,
    data: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Log in with email and password and receive a bearer token."""
    return await service.login(data.email, data.password, ip_address=get_real_client_ip(request))


@router.get("/getAll", response_model=list[AccountResponse])
async def list_accounts(
    service: Annotated[AccountService, Depends(get_account_service)],
) -> list[AccountResponse]:
    """List all accounts."""
    return await service.list_accounts()


@router.put("/update/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: UUID,
    data: AccountUpdate,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> AccountResponse:
    """Update an account.

    Note: a ``password`` sent here replaces the stored secret as-is.
    """
    return await service.update_account(account_id, data)


@router.delete("/delete/{account_id}", response_model=MessageResponse)
async def delete_account(
    account_id: UUID,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> MessageResponse:
    """Delete an account together with its employees."""
    return await service.delete_account(account_id)
