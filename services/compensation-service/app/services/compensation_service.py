"""
Business logic service layer.

Turns raw caller input into checked domain values and runs the matching
repository operation. Nothing here retries: a failure is reported once, with
its ``ErrorKind``, and retry policy is left to the caller.
"""

import structlog

from ..domain.entities import (
    EmployeeSalary,
    UncheckedEmployeeData,
    UncheckedEmployeeName,
    UncheckedSalaryMultiplier,
)
from ..domain.exceptions import CompensationServiceException
from ..metrics import track_operation
from ..repositories.compensation_repository import ICompensationRepository

logger = structlog.get_logger(__name__)


class CompensationService:
    """
    Employee compensation operations.

    Validation happens before any storage access, so rejected input never
    touches persisted state.
    """

    def __init__(self, repository: ICompensationRepository):
        """
        Initialize compensation service.

        Args:
            repository: Store holding the employee records
        """
        self.repository = repository

    async def initialize(self, clear: bool = False) -> None:
        """Prepare the underlying store (see ``initialize_schema``)."""
        await self.repository.initialize_schema(clear=clear)

    async def get_salary(self, raw: UncheckedEmployeeName) -> EmployeeSalary:
        """
        Get an employee's current salary.

        Raises:
            InvalidInputException: If the name is empty or whitespace
            EmployeeNotFoundException: If no employee has this name
            StorageUnavailableException: If the store cannot be reached
        """
        try:
            name = raw.check()
            salary = await self.repository.get_salary(name)
        except CompensationServiceException as e:
            self._record_failure("get_salary", e)
            raise

        track_operation("get_salary", "success")
        return salary

    async def add_employee(self, raw: UncheckedEmployeeData) -> None:
        """
        Create an employee record.

        Raises:
            InvalidInputException: If the name or salary is invalid
            EmployeeConflictException: If the name is already taken
            StorageUnavailableException: If the store cannot be reached
        """
        try:
            data = raw.check()
            await self.repository.insert_employee(data)
        except CompensationServiceException as e:
            self._record_failure("add_employee", e)
            raise

        track_operation("add_employee", "success")
        logger.info("Employee added", employee=data.name, salary=data.salary)

    async def increase_salary(self, raw: UncheckedSalaryMultiplier) -> EmployeeSalary:
        """
        Raise an employee's salary by a percentage.

        Returns:
            The salary immediately before the increase

        Raises:
            InvalidInputException: If the name or percentage is invalid
            EmployeeNotFoundException: If no employee has this name
            SalaryOverflowException: If the raised salary is not storable
            InvalidResultException: If the raised salary would not be positive
            StorageUnavailableException: If the store cannot be reached
        """
        try:
            multiplier = raw.check()
            old_salary = await self.repository.apply_increase(multiplier)
        except CompensationServiceException as e:
            self._record_failure("increase_salary", e)
            raise

        track_operation("increase_salary", "success")
        return old_salary

    @staticmethod
    def _record_failure(operation: str, exc: CompensationServiceException) -> None:
        track_operation(operation, exc.kind.value)
        logger.info(
            "Compensation operation rejected",
            operation=operation,
            error_kind=exc.kind.value,
            error=exc.message,
        )
