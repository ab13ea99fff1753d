"""
Unit tests for domain entities.

Tests for the unchecked input types and their checked counterparts.
"""

from dataclasses import FrozenInstanceError

import pytest

from app.domain.entities import (
    NAME_MAX_LENGTH,
    SALARY_MAX,
    EmployeeData,
    EmployeeName,
    EmployeeSalary,
    SalaryMultiplier,
    UncheckedEmployeeData,
    UncheckedEmployeeName,
    UncheckedEmployeeSalary,
    UncheckedSalaryMultiplier,
)
from app.domain.exceptions import ErrorKind, InvalidInputException


class TestEmployeeName:
    """Tests for employee name validation."""

    def test_valid_name(self):
        """Test a regular name passes unchanged."""
        assert UncheckedEmployeeName("Test Employee").check() == EmployeeName("Test Employee")

    def test_name_is_not_trimmed(self):
        """Test surrounding whitespace is kept; lookups are exact."""
        assert UncheckedEmployeeName("  Anna ").check().name == "  Anna "

    def test_unicode_name(self):
        """Test non-ASCII names are accepted."""
        name = "Иван Сергеевич Фрунзенко"
        assert UncheckedEmployeeName(name).check().name == name

    @pytest.mark.parametrize("name", ["", " ", "\t\n  "])
    def test_empty_or_whitespace_name_rejected(self, name):
        """Test empty and whitespace-only names fail."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedEmployeeName(name).check()
        assert exc_info.value.kind == ErrorKind.INVALID_INPUT
        assert exc_info.value.details["field"] == "name"

    def test_too_long_name_rejected(self):
        """Test names longer than the storage column fail."""
        with pytest.raises(InvalidInputException, match="must not exceed"):
            UncheckedEmployeeName("x" * (NAME_MAX_LENGTH + 1)).check()

    @pytest.mark.parametrize("name", ["A\x00B", "\x00"])
    def test_nul_character_rejected(self, name):
        """Test names with NUL characters fail before reaching storage."""
        with pytest.raises(InvalidInputException, match="NUL"):
            UncheckedEmployeeName(name).check()

    def test_nul_character_rejected_in_employee_data(self):
        """Test the same rule applies when creating an employee."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedEmployeeData(name="A\x00B", salary=100).check()
        assert exc_info.value.details["field"] == "name"

    def test_non_string_name_rejected(self):
        """Test non-string input fails instead of being coerced."""
        with pytest.raises(InvalidInputException):
            UncheckedEmployeeName(None).check()


class TestEmployeeSalary:
    """Tests for salary validation."""

    def test_valid_salary(self):
        """Test positive salary passes."""
        assert UncheckedEmployeeSalary(5000).check() == EmployeeSalary(5000)

    @pytest.mark.parametrize("amount", [0, -1, -5000])
    def test_non_positive_salary_rejected(self, amount):
        """Test zero and negative salaries fail."""
        with pytest.raises(InvalidInputException, match="greater than zero"):
            UncheckedEmployeeSalary(amount).check()

    def test_salary_above_storage_range_rejected(self):
        """Test salaries that do not fit the INT column fail."""
        assert UncheckedEmployeeSalary(SALARY_MAX).check().amount == SALARY_MAX
        with pytest.raises(InvalidInputException):
            UncheckedEmployeeSalary(SALARY_MAX + 1).check()

    @pytest.mark.parametrize("amount", ["100", 100.0, True])
    def test_non_integer_salary_rejected(self, amount):
        """Test strings, floats and booleans fail."""
        with pytest.raises(InvalidInputException, match="integer"):
            UncheckedEmployeeSalary(amount).check()

    def test_salary_is_immutable(self):
        """Test checked salary cannot be changed in place."""
        salary = EmployeeSalary(100)
        with pytest.raises(FrozenInstanceError):
            salary.amount = 200


class TestEmployeeData:
    """Tests for new employee validation."""

    def test_valid_data(self):
        """Test valid name and salary pass."""
        data = UncheckedEmployeeData(name="A", salary=5000).check()
        assert data == EmployeeData(name="A", salary=5000)

    def test_zero_salary_rejected(self):
        """Test zero salary fails."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedEmployeeData(name="A", salary=0).check()
        assert exc_info.value.details["field"] == "salary"

    def test_name_checked_before_salary(self):
        """Test the name violation is reported when both fields are invalid."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedEmployeeData(name="   ", salary=0).check()
        assert exc_info.value.details["field"] == "name"


class TestSalaryMultiplier:
    """Tests for salary increase request validation."""

    def test_valid_multiplier(self):
        """Test valid name and percentage pass."""
        multiplier = UncheckedSalaryMultiplier(name="A", percentage=25).check()
        assert multiplier == SalaryMultiplier(name="A", percentage=25)

    def test_large_percentage_accepted(self):
        """Test there is no business upper bound on the percentage."""
        assert UncheckedSalaryMultiplier(name="A", percentage=1000).check().percentage == 1000

    @pytest.mark.parametrize("percentage", [0, -25])
    def test_non_positive_percentage_rejected(self, percentage):
        """Test zero and negative percentages fail."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedSalaryMultiplier(name="A", percentage=percentage).check()
        assert exc_info.value.details["field"] == "percentage"

    def test_whitespace_name_rejected(self):
        """Test whitespace-only name fails."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedSalaryMultiplier(name=" ", percentage=25).check()
        assert exc_info.value.details["field"] == "name"

    def test_name_checked_before_percentage(self):
        """Test the first violated condition is reported."""
        with pytest.raises(InvalidInputException) as exc_info:
            UncheckedSalaryMultiplier(name="", percentage=0).check()
        assert exc_info.value.details["field"] == "name"
