"""Employee repository."""

from uuid import UUID

from sqlalchemy import select

from roster_api.models.orm.employee import EmployeeORM
from roster_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def get_by_email(self, email: str) -> EmployeeORM | None:
        """Get employee by email.

        Args:
            email: Employee email address

        Returns:
            EmployeeORM or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.email == email)
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check whether any employee already uses an email."""
        return await self.get_by_email(email) is not None

    async def get_for_admin(self, admin_id: UUID) -> list[EmployeeORM]:
        """Get all employees owned by an admin.

        Args:
            admin_id: Owning account UUID

        Returns:
            List of EmployeeORM in creation order
        """
        result = await self.session.execute(
            select(EmployeeORM)
            .where(EmployeeORM.admin_id == admin_id)
            .order_by(EmployeeORM.created_at)
        )
        return list(result.scalars().all())
