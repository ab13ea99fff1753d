"""
Employee salary endpoints.

Query parameters are wrapped in the unchecked domain types and validated by
the service; domain errors are turned into HTTP responses by the handler
registered in ``app.main``.
"""

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_compensation_service
from ..domain.entities import (
    UncheckedEmployeeData,
    UncheckedEmployeeName,
    UncheckedSalaryMultiplier,
)
from ..models import ErrorResponse, MessageResponse, SalaryIncreaseResponse, SalaryResponse
from ..services.compensation_service import CompensationService

router = APIRouter(prefix="/employee", tags=["Employee"])

BAD_REQUEST = {400: {"description": "Invalid input", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "Employee not found", "model": ErrorResponse}}
UNAVAILABLE = {503: {"description": "Storage unavailable", "model": ErrorResponse}}


@router.get(
    "/salary",
    response_model=SalaryResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **UNAVAILABLE},
    summary="Get employee salary",
)
async def get_employee_salary(
    name: str = Query(..., description="Exact employee name"),
    service: CompensationService = Depends(get_compensation_service),
):
    """Return the current salary of the named employee."""
    salary = await service.get_salary(UncheckedEmployeeName(name=name))
    return SalaryResponse(name=name, salary=salary.amount)


@router.put(
    "/add",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **BAD_REQUEST,
        409: {"description": "Employee already exists", "model": ErrorResponse},
        **UNAVAILABLE,
    },
    summary="Add employee",
)
async def add_new_employee(
    name: str = Query(..., description="Employee name, unique"),
    salary: int = Query(..., description="Initial salary, greater than zero"),
    service: CompensationService = Depends(get_compensation_service),
):
    """Create a new employee record."""
    await service.add_employee(UncheckedEmployeeData(name=name, salary=salary))
    return MessageResponse(message=f"Employee {name} added")


@router.post(
    "/increase",
    response_model=SalaryIncreaseResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **UNAVAILABLE},
    summary="Increase employee salary",
)
async def increase_employee_salary(
    name: str = Query(..., description="Exact employee name"),
    percentage: int = Query(..., description="Raise in percent, greater than zero"),
    service: CompensationService = Depends(get_compensation_service),
):
    """
    Raise the named employee's salary by a percentage.

    Returns the salary as it was before the raise.
    """
    old_salary = await service.increase_salary(
        UncheckedSalaryMultiplier(name=name, percentage=percentage)
    )
    return SalaryIncreaseResponse(name=name, old_salary=old_salary.amount)
