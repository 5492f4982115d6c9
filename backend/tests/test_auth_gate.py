"""Access gate tests."""

from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from roster_api.exceptions import MissingTokenError, UnauthorizedError
from roster_api.security.auth import authenticate
from roster_api.security.tokens import TokenService


@pytest.fixture
def token_service() -> TokenService:
    return TokenService("gate-test-secret-abcdefghijklmnopqrstuvwxyz")


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestAuthenticate:
    """Tests for resolving bearer credentials."""

    def test_no_credentials(self, token_service: TokenService) -> None:
        with pytest.raises(MissingTokenError) as exc_info:
            authenticate(None, token_service)
        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "No token provided, access denied."

    def test_valid_token(self, token_service: TokenService) -> None:
        account_id = uuid4()
        token = token_service.issue(account_id, "a@x.com")
        assert authenticate(_credentials(token), token_service) == account_id

    def test_invalid_token(self, token_service: TokenService) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            authenticate(_credentials("not-a-token"), token_service)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid or expired token."

    def test_token_signed_elsewhere(self, token_service: TokenService) -> None:
        foreign = TokenService("some-other-deployment-secret-000000000000")
        token = foreign.issue(uuid4(), "a@x.com")
        with pytest.raises(UnauthorizedError):
            authenticate(_credentials(token), token_service)
