"""
PostgreSQL implementation of the compensation repository.

Salary increases run inside one transaction that locks the employee row on
read (``SELECT ... FOR UPDATE``). A concurrent increase for the same employee
waits for the lock and then reads the committed value, so increases compose
instead of losing updates. Rows of other employees are not locked.
"""

import asyncio
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import asyncpg
import structlog

from ..database import DatabaseManager
from ..domain.entities import (
    EmployeeData,
    EmployeeName,
    EmployeeSalary,
    IncreaseState,
    SalaryMultiplier,
    UncheckedEmployeeSalary,
)
from ..domain.exceptions import (
    CompensationServiceException,
    EmployeeConflictException,
    EmployeeNotFoundException,
    InvalidInputException,
    StorageUnavailableException,
)
from ..domain.salary_math import increase_by_percentage
from ..metrics import track_db_operation
from .compensation_repository import ICompensationRepository

logger = structlog.get_logger(__name__)

CREATE_EMPLOYEES_TABLE = """
    CREATE TABLE IF NOT EXISTS employees (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        salary INT NOT NULL
    )
"""

CREATE_EMPLOYEES_NAME_INDEX = (
    "CREATE UNIQUE INDEX IF NOT EXISTS employees_name_key ON employees (name)"
)

TRUNCATE_EMPLOYEES = "TRUNCATE TABLE employees"

SELECT_SALARY = "SELECT salary FROM employees WHERE name = $1"

SELECT_SALARY_FOR_UPDATE = "SELECT salary FROM employees WHERE name = $1 FOR UPDATE"

INSERT_EMPLOYEE = "INSERT INTO employees (name, salary) VALUES ($1, $2)"

UPDATE_SALARY = "UPDATE employees SET salary = $1 WHERE name = $2"

# Driver failures that mean the store could not serve the request.
# asyncpg.DataError is a PostgresError but is handled first as bad input.
STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class PostgresCompensationRepository(ICompensationRepository):
    """PostgreSQL implementation for employee salary persistence."""

    def __init__(self, db: DatabaseManager):
        """
        Initialize repository.

        Args:
            db: Database manager owning the connection pool
        """
        self.db = db

    @asynccontextmanager
    async def _storage_operation(self, operation: str) -> AsyncGenerator[None, None]:
        """Translate driver failures and record operation latency."""
        start_time = time.perf_counter()
        try:
            yield
        except asyncpg.DataError as e:
            logger.warning("Storage rejected value", operation=operation, error=str(e))
            raise InvalidInputException("value", operation, str(e)) from e
        except STORAGE_ERRORS as e:
            logger.error("Storage operation failed", operation=operation, error=str(e))
            raise StorageUnavailableException(operation, str(e)) from e
        finally:
            track_db_operation(operation, time.perf_counter() - start_time)

    async def initialize_schema(self, clear: bool = False) -> None:
        """Create the employees table and name index; optionally truncate."""
        async with self._storage_operation("initialize_schema"):
            async with self.db.acquire() as conn:
                async with conn.transaction():
                    await conn.execute(CREATE_EMPLOYEES_TABLE)
                    await conn.execute(CREATE_EMPLOYEES_NAME_INDEX)
                    if clear:
                        await conn.execute(TRUNCATE_EMPLOYEES)

        logger.info("Employees schema initialized", cleared=clear)

    async def get_salary(self, name: EmployeeName) -> EmployeeSalary:
        async with self._storage_operation("get_salary"):
            async with self.db.acquire() as conn:
                row = await conn.fetchrow(SELECT_SALARY, name.name)

        if row is None:
            raise EmployeeNotFoundException(name.name)

        return UncheckedEmployeeSalary(row["salary"]).check()

    async def insert_employee(self, data: EmployeeData) -> None:
        async with self._storage_operation("insert_employee"):
            async with self.db.acquire() as conn:
                try:
                    await conn.execute(INSERT_EMPLOYEE, data.name, data.salary)
                except asyncpg.UniqueViolationError as e:
                    raise EmployeeConflictException(data.name) from e

    async def apply_increase(self, multiplier: SalaryMultiplier) -> EmployeeSalary:
        """Lock the row, compute the raise and write it in one transaction."""
        state = IncreaseState.IDLE
        try:
            async with self._storage_operation("apply_increase"):
                async with self.db.acquire() as conn:
                    async with conn.transaction():
                        state = IncreaseState.READING
                        row = await conn.fetchrow(SELECT_SALARY_FOR_UPDATE, multiplier.name)
                        if row is None:
                            raise EmployeeNotFoundException(multiplier.name)
                        current = UncheckedEmployeeSalary(row["salary"]).check()

                        state = IncreaseState.COMPUTING
                        new_salary, old_salary = increase_by_percentage(
                            current, multiplier.percentage
                        )

                        # Commit happens on leaving the transaction block
                        state = IncreaseState.WRITING
                        await conn.execute(UPDATE_SALARY, new_salary.amount, multiplier.name)
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
        try:
            async with self.db.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except STORAGE_ERRORS as e:
            logger.warning("Database ping failed", error=str(e))
            return False
