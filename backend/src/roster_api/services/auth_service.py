"""Registration and login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster_api.exceptions import DuplicateEmailError, InvalidCredentialsError, ValidationError
from roster_api.models.dto.account import AccountCreate, AccountResponse
from roster_api.models.dto.auth import LoginResponse
from roster_api.repositories.account_repository import AccountRepository
from roster_api.security.password import PasswordService, get_password_service
from roster_api.security.tokens import TokenService
from roster_api.utils.security_events import SecurityEventType, log_security_event

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account registration and credential login."""

    def __init__(
        self,
        session: AsyncSession,
        token_service: TokenService,
        password_service: PasswordService | None = None,
    ) -> None:
        """Initialize service with database session and security collaborators."""
        self.session = session
        self.account_repo = AccountRepository(session)
        self.token_service = token_service
        self.password_service = password_service or get_password_service()

    async def register(self, data: AccountCreate, ip_address: str | None = None) -> AccountResponse:
        """Register a new admin account.

        The password is hashed before anything is persisted and the plaintext
        is not kept.

        Args:
            data: Registration data
            ip_address: Client IP for the security log

        Returns:
            Created account without its password secret

        Raises:
            DuplicateEmailError: If the email is taken, including when a
                concurrent registration wins the unique constraint
        """
        if await self.account_repo.get_by_email(data.email) is not None:
            raise DuplicateEmailError(data.email)

        password_hash = await self.password_service.hash_password_async(data.password)

        try:
            account = await self.account_repo.create(
                name=data.name,
                email=data.email,
                password_hash=password_hash,
                phone_number=data.phone_number,
                gender=data.gender.value,
            )
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("Registration lost unique-email race")
            raise DuplicateEmailError(data.email) from e

        log_security_event(
            SecurityEventType.USER_CREATED,
            user_id=account.id,
            user_email=account.email,
            ip_address=ip_address,
        )
        return AccountResponse.model_validate(account)

    async def login(
        self,
        email: str | None,
        password: str | None,
        ip_address: str | None = None,
    ) -> LoginResponse:
        """Authenticate with email and password and issue an access token.

        Unknown emails and wrong passwords fail identically.

        Args:
            email: Account email
            password: Plain text password
            ip_address: Client IP for the security log

        Returns:
            LoginResponse with the token, account id and display name

        Raises:
            ValidationError: If either field is missing
            InvalidCredentialsError: If the credentials do not match an account
        """
        if not email or not password:
            raise ValidationError("Both email and password are required.")

        account = await self.account_repo.get_by_email(email)
        if account is None:
            # Burn a bcrypt comparison so timing does not reveal unknown emails
            await self.password_service.verify_password_async(
                password, self.password_service.dummy_hash
            )
            log_security_event(
                SecurityEventType.LOGIN_FAILED,
                ip_address=ip_address,
                details={"reason": "unknown_email"},
                success=False,
            )
            raise InvalidCredentialsError()

        if not await self.password_service.verify_password_async(password, account.password_hash):
            log_security_event(
                SecurityEventType.LOGIN_FAILED,
                user_id=account.id,
                ip_address=ip_address,
                details={"reason": "wrong_password"},
                success=False,
            )
            raise InvalidCredentialsError()

        token = self.token_service.issue(account.id, account.email)
        log_security_event(
            SecurityEventType.LOGIN_SUCCESS,
            user_id=account.id,
            user_email=account.email,
            ip_address=ip_address,
        )
        return LoginResponse(token=token, user_id=account.id, username=account.name)
