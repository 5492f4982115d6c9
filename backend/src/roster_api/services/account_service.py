"""Account management service."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster_api.exceptions import AccountNotFoundError, DuplicateEmailError
from roster_api.models.dto.account import AccountResponse, AccountUpdate
from roster_api.models.dto.base import MessageResponse
from roster_api.repositories.account_repository import AccountRepository
from roster_api.utils.security_events import SecurityEventType, log_security_event


class AccountService:
    """Service for listing, updating and deleting admin accounts."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.account_repo = AccountRepository(session)

    async def list_accounts(self) -> list[AccountResponse]:
        """List all accounts."""
        accounts = await self.account_repo.list_all()
        return [AccountResponse.model_validate(a) for a in accounts]

    async def update_account(self, account_id: UUID, data: AccountUpdate) -> AccountResponse:
        """Replace the fields present in the request.

        A ``password`` value replaces the stored secret verbatim; it is not
        hashed on this path.

        Args:
            account_id: Account UUID
            data: Fields to replace

        Returns:
            Updated account

        Raises:
            AccountNotFoundError: If the account does not exist
            DuplicateEmailError: If the new email belongs to another account
        """
        account = await self.account_repo.get(account_id)
        if account is None:
            raise AccountNotFoundError(str(account_id))

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "password" in changes:
            changes["password_hash"] = changes.pop("password")

        try:
            account = await self.account_repo.update(account, changes)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEmailError(data.email) from e

        log_security_event(
            SecurityEventType.USER_UPDATED,
            user_id=account.id,
            details={"fields": sorted(changes)},
        )
        return AccountResponse.model_validate(account)

    async def delete_account(self, account_id: UUID) -> MessageResponse:
        """Delete an account and, through the foreign key, its employees.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        account = await self.account_repo.get(account_id)
        if account is None:
            raise AccountNotFoundError(str(account_id))

        await self.account_repo.delete(account)
        log_security_event(SecurityEventType.USER_DELETED, user_id=account_id)
        return MessageResponse(message="User deleted successfully")
