"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define contracts for data persistence (credentials, employees,
    attendance, payroll ledger)
  - Enable dependency inversion (use cases don't depend on PostgreSQL)

Collaborators:
  - domain.entities: Employee, AttendanceRecord, PayrollRecord
  - identity.users: User, UserRole
  - Implementations in infrastructure.repositories (postgres / in_memory)

Constraints:
  - Pure interfaces (Protocol), no implementation
  - Storage failures surface as crosscutting.exceptions.DatabaseError

Notes:
  - Uniqueness (users.email, payroll (employee_id, period)) is enforced by
    the storage layer and reported with typed exceptions
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional, Protocol

from ..identity.users import User, UserRole
from .entities import AttendanceRecord, Employee, PayrollRecord


class UserRepository(Protocol):
    """
    R: Credential Store.

    No update/delete: users are created by registration and read at login.
    """

    def get_user_by_email(self, email: str) -> Optional[User]:
        """R: Fetch a user by normalized email, None when absent."""
        ...

    def create_user(
        self, *, email: str, name: str, password_hash: str, role: UserRole
    ) -> User:
        """
        R: Persist a new user.

        Raises:
            DuplicateIdentityError: email already registered
        """
        ...


class EmployeeRepository(Protocol):
    """R: Employee data source (CRUD + snapshot for payroll)."""

    def list_employees(self) -> List[Employee]:
        """R: All employees, newest first."""
        ...

    def get_employee(self, employee_id: int) -> Optional[Employee]: ...

    def create_employee(
        self, *, name: str, email: str, department: str, basic_salary: Decimal
    ) -> Employee: ...

    def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        email: str,
        department: str,
        basic_salary: Decimal,
    ) -> Optional[Employee]:
        """R: Returns None when the employee does not exist."""
        ...

    def delete_employee(self, employee_id: int) -> bool:
        """R: True when a row was deleted."""
        ...

    def count_employees(self) -> int: ...


class AttendanceRepository(Protocol):
    """R: Attendance marks."""

    def create_attendance(
        self, *, employee_id: int, day: date, status: str
    ) -> AttendanceRecord: ...

    def list_attendance(self) -> List[AttendanceRecord]:
        """R: All marks newest first, with employee_name filled in."""
        ...

    def count_attendance(self) -> int: ...


class PayrollRepository(Protocol):
    """
    R: Payroll ledger.

    Records are keyed by (employee_id, period) and never mutated.
    """

    def has_period(self, period: str) -> bool:
        """R: True when any record exists for the period."""
        ...

    def save_record(self, record: PayrollRecord) -> PayrollRecord:
        """
        R: Insert one record (its own transaction).

        Raises:
            DuplicatePayrollRecordError: (employee_id, period) already stored
            DatabaseError: any other storage failure
        """
        ...

    def list_records(self) -> List[PayrollRecord]:
        """R: All records newest first, with employee_name filled in."""
        ...

    def count_records(self) -> int: ...
