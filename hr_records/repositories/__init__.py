"""Repositories wrapping the SQLAlchemy session."""

from .employee_repository import EmployeeRepository
from .pay_statement_repository import PayRow, PayStatementRepository

__all__ = ["EmployeeRepository", "PayRow", "PayStatementRepository"]
