"""Employee management scoped to the owning admin."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster_api.exceptions import DuplicateEmailError, EmployeeNotFoundError, UnauthorizedError
from roster_api.models.dto.base import MessageResponse
from roster_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from roster_api.models.orm.employee import EmployeeORM
from roster_api.repositories.account_repository import AccountRepository
from roster_api.repositories.employee_repository import EmployeeRepository
from roster_api.security.auth import CurrentAdmin

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for managing the employees of the authenticated admin.

    Ownership is bound at creation from the verified caller. By default,
    lookups by id are not restricted to the owner; with
    ``enforce_ownership`` they are, and other admins' records read as
    not found.
    """

    def __init__(self, session: AsyncSession, enforce_ownership: bool = False) -> None:
        """Initialize service with database session."""
        self.session = session
        self.enforce_ownership = enforce_ownership
        self.employee_repo = EmployeeRepository(session)
        self.account_repo = AccountRepository(session)

    async def _load(self, employee_id: UUID, admin: CurrentAdmin) -> EmployeeORM:
        employee = await self.employee_repo.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(str(employee_id))
        if self.enforce_ownership and employee.admin_id != admin.id:
            logger.info("Admin %s denied access to employee %s", admin.id, employee_id)
            raise EmployeeNotFoundError(str(employee_id))
        return employee

    async def create_employee(self, data: EmployeeCreate, admin: CurrentAdmin) -> EmployeeResponse:
        """Create an employee owned by the calling admin.

        Args:
            data: Employee creation data
            admin: Verified caller; the only source of the owner id

        Returns:
            Created EmployeeResponse

        Raises:
            DuplicateEmailError: If any employee already uses the email
            UnauthorizedError: If the caller's account no longer exists
        """
        if await self.employee_repo.email_exists(data.email):
            raise DuplicateEmailError(data.email)

        # A token can outlive its account; never create orphaned employees
        if await self.account_repo.get(admin.id) is None:
            raise UnauthorizedError()

        try:
            employee = await self.employee_repo.create(
                name=data.name,
                email=data.email,
                gender=data.gender.value,
                age=data.age,
                role=data.role.value,
                phone_number=data.phone_number,
                joining_date=data.joining_date,
                admin_id=admin.id,
            )
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEmailError(data.email) from e

        return EmployeeResponse.model_validate(employee)

    async def list_employees(self, admin: CurrentAdmin) -> list[EmployeeResponse]:
        """List the employees owned by the calling admin."""
        employees = await self.employee_repo.get_for_admin(admin.id)
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def get_employee(self, employee_id: UUID, admin: CurrentAdmin) -> EmployeeResponse:
        """Get one employee by id.

        Raises:
            EmployeeNotFoundError: If the employee does not exist (or is not
                visible to the caller when ownership is enforced)
        """
        employee = await self._load(employee_id, admin)
        return EmployeeResponse.model_validate(employee)

    async def update_employee(
        self,
        employee_id: UUID,
        data: EmployeeUpdate,
        admin: CurrentAdmin,
    ) -> EmployeeResponse:
        """Replace the fields present in the request. The owner never changes.

        Raises:
            EmployeeNotFoundError: If the employee does not exist or is not visible
            DuplicateEmailError: If the new email belongs to another employee
        """
        employee = await self._load(employee_id, admin)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        try:
            employee = await self.employee_repo.update(employee, changes)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEmailError(data.email) from e

        return EmployeeResponse.model_validate(employee)

    async def delete_employee(self, employee_id: UUID, admin: CurrentAdmin) -> MessageResponse:
        """Delete an employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist or is not visible
        """
        employee = await self._load(employee_id, admin)
        await self.employee_repo.delete(employee)
        return MessageResponse(message="Employee deleted successfully")
