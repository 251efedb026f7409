"""Pydantic schemas for request and response payloads."""

from .employees import (
    EMPLOYEE_ID_MAX,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    SearchField,
)
from .reports import EmployeePayHistory, PayGroup, PayReport, PayStatementEntry
from .salary import SalaryAdjustmentRequest, SalaryAdjustmentResult, SalaryChange

__all__ = [
    "EMPLOYEE_ID_MAX",
    "EmployeeCreate",
    "EmployeePayHistory",
    "EmployeeRead",
    "EmployeeUpdate",
    "PayGroup",
    "PayReport",
    "PayStatementEntry",
    "SalaryAdjustmentRequest",
    "SalaryAdjustmentResult",
    "SalaryChange",
    "SearchField",
]
