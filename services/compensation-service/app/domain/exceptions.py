"""
Custom exceptions for the compensation service domain.

Every failure the service can report belongs to one ``ErrorKind``. Callers
branch on ``exc.kind`` instead of parsing messages, and the HTTP layer maps
each kind to a distinct status code.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    INVALID_RESULT = "invalid_result"
    CONFLICT = "conflict"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class CompensationServiceException(Exception):
    """Base exception for all compensation service errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputException(CompensationServiceException):
    """Raised when a name, salary or percentage fails validation."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Invalid {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class EmployeeNotFoundException(CompensationServiceException):
    """Raised when no employee record matches the given name."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str):
        super().__init__(message=f"Employee not found: {name}", details={"name": name})


class SalaryOverflowException(CompensationServiceException):
    """Raised when a salary computation exceeds the storable integer range."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, operands: tuple):
        message = f"Salary is too high to perform {operation}"
        super().__init__(
            message=message,
            details={"operation": operation, "operands": list(operands)},
        )


class SalaryUnderflowException(CompensationServiceException):
    """Raised when a salary computation drops below the storable integer range."""

    kind = ErrorKind.UNDERFLOW

    def __init__(self, operation: str, operands: tuple):
        message = f"Salary is too low to perform {operation}"
        super().__init__(
            message=message,
            details={"operation": operation, "operands": list(operands)},
        )


class InvalidResultException(CompensationServiceException):
    """Raised when a computed salary would violate the salary invariant."""

    kind = ErrorKind.INVALID_RESULT

    def __init__(self, value: int, reason: str):
        message = f"Computed salary {value} rejected: {reason}"
        super().__init__(message=message, details={"value": value, "reason": reason})


class EmployeeConflictException(CompensationServiceException):
    """Raised when an employee with the same name already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, name: str):
        super().__init__(
            message=f"Employee already exists: {name}", details={"name": name}
        )


class StorageUnavailableException(CompensationServiceException):
    """Raised when the backing store cannot be reached or rejects an operation."""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Storage unavailable during {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
