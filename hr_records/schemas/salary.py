"""Schemas for bulk salary adjustments."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer


class SalaryAdjustmentRequest(BaseModel):
    """Percentage increase applied to salaries in ``[min_salary, max_salary)``."""

    percentage: Decimal = Field(ge=0, le=100)
    min_salary: Decimal = Field(ge=0)
    max_salary: Decimal = Field(ge=0)


class SalaryChange(BaseModel):
    """Before/after salary of one adjusted employee."""

    emp_id: int
    name: str
    old_salary: Decimal
    new_salary: Decimal

    @field_serializer("old_salary", "new_salary")
    def _serialize_salary(self, value: Decimal) -> str:
        return str(value)


class SalaryAdjustmentResult(BaseModel):
    """Outcome of a committed adjustment batch."""

    affected: int
    message: str
    percentage: Decimal
    min_salary: Decimal
    max_salary: Decimal
    changes: list[SalaryChange] = Field(default_factory=list)

    @field_serializer("percentage", "min_salary", "max_salary")
    def _serialize_decimal(self, value: Decimal) -> str:
        return str(value)
