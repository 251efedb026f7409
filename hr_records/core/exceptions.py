"""Error taxonomy shared by services and routers."""
from __future__ import annotations


class HRRecordsError(Exception):
    """Base exception for HR record operations."""


class InvalidInputError(HRRecordsError):
    """Raised when user supplied input fails validation before any query runs."""


class EmployeeNotFoundError(HRRecordsError):
    """Raised when an employee id does not resolve to a record."""

    def __init__(self, emp_id: int) -> None:
        super().__init__(f"Employee {emp_id} not found")
        self.emp_id = emp_id


class DuplicateEmployeeError(HRRecordsError):
    """Raised when a write collides with the unique SSN or email constraint."""


class RecordStoreError(HRRecordsError):
    """Raised when the record store fails to execute a query."""


class SalaryAdjustmentError(RecordStoreError):
    """Raised when a bulk salary adjustment is rolled back."""


__all__ = [
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
    "HRRecordsError",
    "InvalidInputError",
    "RecordStoreError",
    "SalaryAdjustmentError",
]
