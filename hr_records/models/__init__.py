"""Database models for the HR records domain."""
from __future__ import annotations

from .base import Base
from .employees import Employee, EmployeeStatus
from .pay_statements import PayStatement

__all__ = [
    "Base",
    "Employee",
    "EmployeeStatus",
    "PayStatement",
]
