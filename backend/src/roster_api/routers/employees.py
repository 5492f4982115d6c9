"""Employee router. Every route requires a bearer token."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from roster_api.dependencies import get_employee_service
from roster_api.models.dto.base import MessageResponse
from roster_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from roster_api.security.auth import CurrentAdmin, get_current_admin
from roster_api.services.employee_service import EmployeeService

router = APIRouter()


@router.post("/create", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    current_admin: Annotated[CurrentAdmin, Depends(get_current_admin)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Create an employee owned by the authenticated admin.

    Any ``adminId`` in the body is ignored.
    """
    return await service.create_employee(data, current_admin)


@router.get("/getAll", response_model=list[EmployeeResponse])
async def list_employees(
    current_admin: Annotated[CurrentAdmin, Depends(get_current_admin)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> list[EmployeeResponse]:
    """List the authenticated admin's employees."""
    return await service.list_employees(current_admin)


@router.get("/get/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: UUID,
    current_admin: Annotated[CurrentAdmin, Depends(get_current_admin)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get a single employee by ID."""
    return await service.get_employee(employee_id, current_admin)


@router.put("/update/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    data: EmployeeUpdate,
    current_admin: Annotated[CurrentAdmin, Depends(get_current_admin)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Update an employee. The owning admin cannot be changed."""
    return await service.update_employee(employee_id, data, current_admin)


@router.delete("/delete/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: UUID,
    current_admin: Annotated[CurrentAdmin, Depends(get_current_admin)],
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> MessageResponse:
    """Delete an employee."""
    return await service.delete_employee(employee_id, current_admin)
