"""
Salary arithmetic.

Python integers never overflow, so every step is checked explicitly against
the range of the storage column. The step order is fixed: it determines where
integer truncation happens and which step reports an overflow.
"""

from typing import Tuple

from .entities import SALARY_MAX, SALARY_MIN, EmployeeSalary
from .exceptions import (
    InvalidResultException,
    SalaryOverflowException,
    SalaryUnderflowException,
)


def _checked(value: int, operation: str, *operands: int) -> int:
    if value > SALARY_MAX:
        raise SalaryOverflowException(operation, operands)
    if value < SALARY_MIN:
        raise SalaryUnderflowException(operation, operands)
    return value


def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def increase_by_percentage(
    current: EmployeeSalary, percentage: int
) -> Tuple[EmployeeSalary, EmployeeSalary]:
    """
    Raise a salary by a percentage, rounding the raise up.

    Computes ``current + (current * percentage + 99) // 100`` one checked
    step at a time.

    Args:
        current: Salary before the raise
        percentage: Validated percentage, greater than zero

    Returns:
        Tuple of (new_salary, old_salary)

    Raises:
        SalaryOverflowException: If any step exceeds SALARY_MAX
        SalaryUnderflowException: If any step drops below SALARY_MIN
        InvalidResultException: If the new salary is not greater than zero
    """
    amount = current.amount

    addition = _checked(amount * percentage, "multiplication", amount, percentage)
    addition = _checked(addition + 100, "addition", addition, 100)
    addition = _checked(addition - 1, "subtraction", addition, 1)
    addition = _truncating_div(addition, 100)
    new_amount = _checked(amount + addition, "addition", amount, addition)

    if new_amount <= 0:
        raise InvalidResultException(new_amount, "salary must be greater than zero")

    return EmployeeSalary(amount=new_amount), current
