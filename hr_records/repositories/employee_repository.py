"""Data access for employee records."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from sqlalchemy import or_, select

from hr_records.models import Employee

from .base import BaseRepository


class EmployeeRepository(BaseRepository):
    """Repository translating employee filters into SQL."""

    def list_all(self) -> list[Employee]:
        statement = select(Employee).order_by(Employee.emp_id)
        return list(self._session.scalars(statement))

    def get(self, emp_id: int) -> Employee | None:
        return self._session.get(Employee, emp_id)

    def search_by_name(self, term: str) -> list[Employee]:
        """Case-insensitive substring match on first or last name."""

        statement = (
            select(Employee)
            .where(
                or_(
                    Employee.first_name.icontains(term, autoescape=True),
                    Employee.last_name.icontains(term, autoescape=True),
                )
            )
            .order_by(Employee.emp_id)
        )
        return list(self._session.scalars(statement))

    def search_by_ssn(self, ssn: str) -> list[Employee]:
        statement = select(Employee).where(Employee.ssn == ssn).order_by(Employee.emp_id)
        return list(self._session.scalars(statement))

    def search_by_id(self, emp_id: int) -> list[Employee]:
        statement = select(Employee).where(Employee.emp_id == emp_id)
        return list(self._session.scalars(statement))

    def in_salary_range(
        self,
        min_salary: Decimal,
        max_salary: Decimal,
        *,
        lock: bool = False,
    ) -> Sequence[Employee]:
        """Return employees with ``min_salary <= salary < max_salary``."""

        statement = (
            select(Employee)
            .where(Employee.salary >= min_salary, Employee.salary < max_salary)
            .order_by(Employee.emp_id)
        )
        if lock:
            statement = statement.with_for_update()
        return self._session.scalars(statement).all()

    def add(self, values: Mapping[str, Any]) -> Employee:
        employee = Employee(**values)
        self._session.add(employee)
        self._session.flush()
        return employee

    def apply(self, employee: Employee, values: Mapping[str, Any]) -> Employee:
        for field, value in values.items():
            setattr(employee, field, value)
        self._session.flush()
        return employee
