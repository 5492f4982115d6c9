"""Bearer token authentication for protected routes."""

import logging
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roster_api.exceptions import MissingTokenError, TokenError, UnauthorizedError
from roster_api.security.tokens import TokenService
from roster_api.utils.security_events import SecurityEventType, log_security_event

logger = logging.getLogger(__name__)

# auto_error is disabled so a missing header maps to our own 403 response
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentAdmin:
    """Verified identity of the admin making a request."""

    id: UUID


def get_token_service(request: Request) -> TokenService:
    """Get the token service built at application startup."""
    return request.app.state.token_service


def authenticate(
    credentials: HTTPAuthorizationCredentials | None,
    token_service: TokenService,
) -> UUID:
    """Resolve bearer credentials to an account id.

    Args:
        credentials: Parsed ``Authorization: Bearer <token>`` header, if any
        token_service: Service used to verify the token

    Returns:
        Account UUID of the caller

    Raises:
        MissingTokenError: If no bearer token was supplied
        UnauthorizedError: If the token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    try:
        return token_service.verify(credentials.credentials)
    except TokenError as e:
        # Expired and tampered tokens are reported identically to the client
        log_security_event(
            SecurityEventType.TOKEN_REJECTED,
            success=False,
            details={"reason": type(e).__name__},
        )
        raise UnauthorizedError() from e


async def get_current_admin(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> CurrentAdmin:
    """Get the current authenticated admin from the bearer token.

    The verified id is also attached to ``request.state.admin_id`` for
    downstream consumers such as logging.

    Raises:
        MissingTokenError: If no bearer token was supplied
        UnauthorizedError: If the token is invalid or expired
    """
    admin_id = authenticate(credentials, token_service)
    request.state.admin_id = admin_id
    return CurrentAdmin(id=admin_id)
