"""Schemas for employee payloads."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from hr_records.models import EmployeeStatus

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# Upper bound of the signed 32-bit INTEGER primary key.
EMPLOYEE_ID_MAX = 2**31 - 1


class SearchField(str, Enum):
    """Fields the employee search can match against."""

    NAME = "name"
    SSN = "ssn"
    EMP_ID = "emp_id"

    @property
    def label(self) -> str:
        return {
            SearchField.NAME: "Name",
            SearchField.SSN: "SSN",
            SearchField.EMP_ID: "Employee ID",
        }[self]


class EmployeeBase(BaseModel):
    """Fields shared by create payloads and read models."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    ssn: str = Field(min_length=1, max_length=11)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(default=None, max_length=32)
    hire_date: date
    job_title: str = Field(min_length=1, max_length=120)
    division: str = Field(min_length=1, max_length=120)
    salary: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @field_validator("first_name", "last_name", "ssn", "job_title", "division", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class EmployeeCreate(EmployeeBase):
    """Payload accepted when creating an employee."""


class EmployeeUpdate(BaseModel):
    """Partial update; only fields that are set are written."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    ssn: str | None = Field(default=None, min_length=1, max_length=11)
    email: str | None = Field(default=None, max_length=255, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(default=None, max_length=32)
    hire_date: date | None = None
    job_title: str | None = Field(default=None, min_length=1, max_length=120)
    division: str | None = Field(default=None, min_length=1, max_length=120)
    salary: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    status: EmployeeStatus | None = None

    def changes(self) -> dict[str, object]:
        """Return the explicitly provided, non-null fields.

        ``phone`` may be cleared by sending ``null`` explicitly.
        """

        values = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in values.items()
            if value is not None or key == "phone"
        }


class EmployeeRead(EmployeeBase):
    """Employee as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    emp_id: int
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_serializer("salary")
    def _serialize_salary(self, value: Decimal) -> str:
        return str(value)
