"""
Tests for domain exceptions.

Each exception carries a distinct kind so callers can branch on it.
"""

from app.domain.exceptions import (
    CompensationServiceException,
    EmployeeConflictException,
    EmployeeNotFoundException,
    ErrorKind,
    InvalidInputException,
    InvalidResultException,
    SalaryOverflowException,
    SalaryUnderflowException,
    StorageUnavailableException,
)


class TestExceptions:
    """Test custom exceptions."""

    def test_invalid_input_exception(self):
        """Test InvalidInputException."""
        exc = InvalidInputException("salary", 0, "must be greater than zero")
        assert "salary" in str(exc)
        assert exc.kind == ErrorKind.INVALID_INPUT
        assert exc.details == {"field": "salary", "value": "0", "reason": "must be greater than zero"}

    def test_employee_not_found_exception(self):
        """Test EmployeeNotFoundException."""
        exc = EmployeeNotFoundException("Test Employee")
        assert "Test Employee" in str(exc)
        assert exc.kind == ErrorKind.NOT_FOUND

    def test_overflow_and_underflow_exceptions(self):
        """Test arithmetic exceptions."""
        overflow = SalaryOverflowException("multiplication", (10, 20))
        underflow = SalaryUnderflowException("subtraction", (0, 1))
        assert overflow.kind == ErrorKind.OVERFLOW
        assert overflow.details["operands"] == [10, 20]
        assert underflow.kind == ErrorKind.UNDERFLOW
        assert "too low" in str(underflow)

    def test_invalid_result_exception(self):
        """Test InvalidResultException."""
        exc = InvalidResultException(0, "salary must be greater than zero")
        assert exc.kind == ErrorKind.INVALID_RESULT
        assert exc.details["value"] == 0

    def test_conflict_exception(self):
        """Test EmployeeConflictException."""
        exc = EmployeeConflictException("A")
        assert exc.kind == ErrorKind.CONFLICT

    def test_storage_unavailable_exception(self):
        """Test StorageUnavailableException."""
        exc = StorageUnavailableException("get_salary", "connection refused")
        assert "get_salary" in str(exc)
        assert "connection refused" in str(exc)
        assert exc.kind == ErrorKind.STORAGE_UNAVAILABLE

    def test_all_kinds_covered(self):
        """Test every error kind has exactly one exception class."""
        classes = CompensationServiceException.__subclasses__()
        assert sorted(cls.kind.value for cls in classes) == sorted(k.value for k in ErrorKind)
