"""Account repository."""

from sqlalchemy import select

from roster_api.models.orm.account import AccountORM
from roster_api.repositories.base import BaseRepository


class AccountRepository(BaseRepository[AccountORM]):
    """Repository for admin account operations."""

    model = AccountORM

    async def get_by_email(self, email: str) -> AccountORM | None:
        """Get an account by exact (case-sensitive) email.

        Args:
            email: Account email address

        Returns:
            AccountORM or None if not found
        """
        result = await self.session.execute(
            select(AccountORM).where(AccountORM.email == email)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[AccountORM]:
        """Get every account ordered by creation time.

        Returns:
            List of AccountORM
        """
        result = await self.session.execute(
            select(AccountORM).order_by(AccountORM.created_at)
        )
        return list(result.scalars().all())
