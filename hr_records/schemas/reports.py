"""Schemas for pay reports."""
from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Literal

from pydantic import BaseModel, computed_field, field_serializer


class PayGroup(BaseModel):
    """Total gross pay and statement count for one grouping key."""

    key: str
    total_pay: Decimal
    employee_count: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_pay(self) -> Decimal:
        if self.employee_count <= 0:
            return Decimal("0")
        return (self.total_pay / self.employee_count).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )

    @field_serializer("total_pay")
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)


class PayReport(BaseModel):
    """Grouped pay totals for a calendar month."""

    group_by: Literal["job_title", "division"]
    month: str
    month_label: str
    period_start: date
    period_end: date
    groups: list[PayGroup]

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pay(self) -> Decimal:
        return sum((group.total_pay for group in self.groups), Decimal("0"))


class PayStatementEntry(BaseModel):
    """One row of an employee's pay history."""

    id: int
    pay_period_start: date
    pay_period_end: date
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal

    @field_serializer("gross_pay", "deductions", "net_pay")
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)


class EmployeePayHistory(BaseModel):
    """An employee together with their most recent pay statements."""

    emp_id: int
    name: str
    job_title: str
    division: str
    salary: Decimal
    status: str
    statements: list[PayStatementEntry]

    @field_serializer("salary")
    def _serialize_salary(self, value: Decimal) -> str:
        return str(value)
