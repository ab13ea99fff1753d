"""
Domain entities for employee compensation.

Unchecked types carry raw input exactly as it arrived from a caller. Each one
exposes ``check()``, which either returns the matching checked type or raises
``InvalidInputException``. Checked types are frozen: a salary changes only by
building a new value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidInputException

# Salaries are stored in a Postgres INT column.
SALARY_MIN = -(2**31)
SALARY_MAX = 2**31 - 1

# Employee names are stored in a VARCHAR(255) column.
NAME_MAX_LENGTH = 255


class IncreaseState(str, Enum):
    """Phases of the salary increase read-modify-write."""

    IDLE = "idle"
    READING = "reading"
    COMPUTING = "computing"
    WRITING = "writing"
    COMMITTED = "committed"
    FAILED = "failed"


def _check_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputException(
            "name", value, "employee name cannot be empty or consist of whitespace"
        )
    if len(value) > NAME_MAX_LENGTH:
        raise InvalidInputException(
            "name", value, f"employee name must not exceed {NAME_MAX_LENGTH} characters"
        )
    if "\x00" in value:
        raise InvalidInputException("name", value, "employee name must not contain NUL characters")
    return value


def _check_positive_int(field: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInputException(field, value, f"{field} must be an integer")
    if value <= 0:
        raise InvalidInputException(field, value, f"{field} must be greater than zero")
    if value > SALARY_MAX:
        raise InvalidInputException(field, value, f"{field} must not exceed {SALARY_MAX}")
    return value


@dataclass(frozen=True)
class EmployeeName:
    """Validated employee name; the unique key of an employee record."""

    name: str


@dataclass(frozen=True)
class EmployeeSalary:
    """Validated salary amount, always greater than zero."""

    amount: int


@dataclass(frozen=True)
class EmployeeData:
    """Validated (name, salary) pair used to create an employee."""

    name: str
    salary: int


@dataclass(frozen=True)
class SalaryMultiplier:
    """Validated request to raise a named employee's salary by a percentage."""

    name: str
    percentage: int


@dataclass
class UncheckedEmployeeName:
    """Employee name as received from a caller."""

    name: Any

    def check(self) -> EmployeeName:
        """Return the validated name or raise InvalidInputException."""
        return EmployeeName(name=_check_name(self.name))


@dataclass
class UncheckedEmployeeSalary:
    """
    Salary amount as received from a caller or read back from storage.

    Stored rows go through this check too, so a corrupted row is reported
    instead of being used in arithmetic.
    """

    amount: Any

    def check(self) -> EmployeeSalary:
        """Return the validated salary or raise InvalidInputException."""
        return EmployeeSalary(amount=_check_positive_int("salary", self.amount))


@dataclass
class UncheckedEmployeeData:
    """New employee data as received from a caller."""

    name: Any
    salary: Any

    def check(self) -> EmployeeData:
        """Validate name first, then salary."""
        name = _check_name(self.name)
        salary = _check_positive_int("salary", self.salary)
        return EmployeeData(name=name, salary=salary)


@dataclass
class UncheckedSalaryMultiplier:
    """Salary increase request as received from a caller."""

    name: Any
    percentage: Any

    def check(self) -> SalaryMultiplier:
        """Validate name first, then percentage; the first violation is raised."""
        name = _check_name(self.name)
        percentage = _check_positive_int("percentage", self.percentage)
        return SalaryMultiplier(name=name, percentage=percentage)
