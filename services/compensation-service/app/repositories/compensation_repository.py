"""
Compensation repository interface (Abstract Base Class).

Defines the contract for employee salary persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod

from ..domain.entities import EmployeeData, EmployeeName, EmployeeSalary, SalaryMultiplier


class ICompensationRepository(ABC):
    """
    Abstract repository interface for employee salary records.

    Implementations must serialize ``apply_increase`` per employee name:
    two concurrent increases for the same employee compose, they never
    overwrite each other. Operations on different employees must not block
    each other.
    """

    @abstractmethod
    async def initialize_schema(self, clear: bool = False) -> None:
        """
        Create the employees store if absent.

        Idempotent. With ``clear=True`` all existing records are deleted as
        well; only test and setup paths pass it.

        Raises:
            StorageUnavailableException: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def get_salary(self, name: EmployeeName) -> EmployeeSalary:
        """
        Get the current salary of an employee (exact, case-sensitive match).

        Raises:
            EmployeeNotFoundException: If no record matches the name
            StorageUnavailableException: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def insert_employee(self, data: EmployeeData) -> None:
        """
        Create a new employee record.

        Raises:
            EmployeeConflictException: If the name is already taken
            StorageUnavailableException: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def apply_increase(self, multiplier: SalaryMultiplier) -> EmployeeSalary:
        """
        Raise an employee's salary atomically.

        Reads the current salary, computes the raised value and writes it back
        as one isolated unit. Nothing is written when any step fails.

        Returns:
            The salary as it was immediately before the increase

        Raises:
            EmployeeNotFoundException: If no record matches the name
            SalaryOverflowException: If the raise exceeds the storable range
            InvalidResultException: If the raised salary would not be positive
            StorageUnavailableException: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check whether the store is reachable.

        Returns:
            True if the store answered, False otherwise
        """
        pass
