"""
In-memory implementation of the compensation repository.

Used as the test double and for running the service without Postgres.
Records live only for the lifetime of the process.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

import structlog

from ..domain.entities import (
    EmployeeData,
    EmployeeName,
    EmployeeSalary,
    IncreaseState,
    SalaryMultiplier,
)
from ..domain.exceptions import (
    CompensationServiceException,
    EmployeeConflictException,
    EmployeeNotFoundException,
)
from ..domain.salary_math import increase_by_percentage
from .compensation_repository import ICompensationRepository

logger = structlog.get_logger(__name__)


class InMemoryCompensationRepository(ICompensationRepository):
    """
    Dictionary-backed employee salary store.

    Increases take an ``asyncio.Lock`` keyed by employee name, the in-process
    equivalent of the row lock the Postgres repository takes.
    """

    def __init__(self):
        self._salaries: Dict[str, int] = {}
        # name -> (lock, number of holders and waiters)
        self._locks: Dict[str, list] = {}

    @asynccontextmanager
    async def _locked(self, name: str) -> AsyncGenerator[None, None]:
        """Hold the per-employee lock; the entry is dropped once unused."""
        entry = self._locks.setdefault(name, [asyncio.Lock(), 0])
        entry[1] += 1
        try:
            async with entry[0]:
                yield
        finally:
            entry[1] -= 1
            if entry[1] == 0 and self._locks.get(name) is entry:
                del self._locks[name]

    async def _read(self, name: str) -> Optional[int]:
        return self._salaries.get(name)

    async def _write(self, name: str, amount: int) -> None:
        self._salaries[name] = amount

    async def initialize_schema(self, clear: bool = False) -> None:
        if clear:
            self._salaries.clear()
        logger.info("In-memory employee store initialized", cleared=clear)

    async def get_salary(self, name: EmployeeName) -> EmployeeSalary:
        amount = await self._read(name.name)
        if amount is None:
            raise EmployeeNotFoundException(name.name)
        return EmployeeSalary(amount=amount)

    async def insert_employee(self, data: EmployeeData) -> None:
        if data.name in self._salaries:
            raise EmployeeConflictException(data.name)
        self._salaries[data.name] = data.salary

    async def apply_increase(self, multiplier: SalaryMultiplier) -> EmployeeSalary:
        state = IncreaseState.IDLE
        try:
            async with self._locked(multiplier.name):
                state = IncreaseState.READING
                amount = await self._read(multiplier.name)
                if amount is None:
                    raise EmployeeNotFoundException(multiplier.name)

                state = IncreaseState.COMPUTING
                new_salary, old_salary = increase_by_percentage(
                    EmployeeSalary(amount=amount), multiplier.percentage
                )

                state = IncreaseState.WRITING
                await self._write(multiplier.name, new_salary.amount)
        except CompensationServiceException as e:
            e.details.setdefault("state", state.value)
            logger.warning(
                "Salary increase failed",
                employee=multiplier.name,
                state=state.value,
                error_kind=e.kind.value,
            )
            raise

        logger.info(
            "Salary increase committed",
            employee=multiplier.name,
            percentage=multiplier.percentage,
            old_salary=old_salary.amount,
            new_salary=new_salary.amount,
            state=IncreaseState.COMMITTED.value,
        )
        return old_salary

    async def ping(self) -> bool:
        return True
