"""Tests for the employee directory service."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from hr_records.core.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    RecordStoreError,
)
from hr_records.models import EmployeeStatus
from hr_records.schemas import EmployeeCreate, EmployeeUpdate
from hr_records.services import EmployeeDirectoryService


def _payload(**overrides: object) -> EmployeeCreate:
    values: dict[str, object] = {
        "first_name": "David",
        "last_name": "Wilson",
        "ssn": "567890123",
        "email": "david.wilson@company.test",
        "phone": "555-0105",
        "hire_date": date(2022, 11, 30),
        "job_title": "Accountant",
        "division": "Finance",
        "salary": Decimal("62000"),
    }
    values.update(overrides)
    return EmployeeCreate.model_validate(values)


def test_create_employee_assigns_id_and_defaults(session: Session) -> None:
    employee = EmployeeDirectoryService(session).create_employee(_payload())

    assert employee.emp_id is not None
    assert employee.full_name == "David Wilson"
    assert employee.status is EmployeeStatus.ACTIVE
    assert employee.salary == Decimal("62000")


@pytest.mark.parametrize(
    "overrides",
    [{"email": "someone.else@company.test"}, {"ssn": "999999999"}],
)
def test_create_employee_rejects_duplicate_ssn_or_email(
    session: Session, make_employee, overrides: dict[str, str]
) -> None:
    make_employee(ssn="567890123", email="david.wilson@company.test")
    service = EmployeeDirectoryService(session)

    with pytest.raises(DuplicateEmployeeError):
        service.create_employee(_payload(**overrides))

    assert len(service.list_employees()) == 1


def test_update_employee_writes_only_provided_fields(session: Session, make_employee) -> None:
    employee = make_employee(job_title="Accountant", salary=Decimal("62000"))

    updated = EmployeeDirectoryService(session).update_employee(
        employee.emp_id,
        EmployeeUpdate(job_title="Senior Accountant", status=EmployeeStatus.INACTIVE),
    )

    assert updated.job_title == "Senior Accountant"
    assert updated.status is EmployeeStatus.INACTIVE
    assert updated.salary == Decimal("62000")
    assert updated.first_name == employee.first_name


def test_update_employee_can_clear_phone(session: Session, make_employee) -> None:
    employee = make_employee(phone="555-0199")

    updated = EmployeeDirectoryService(session).update_employee(
        employee.emp_id, EmployeeUpdate.model_validate({"phone": None})
    )

    assert updated.phone is None


def test_update_employee_rejects_taken_email(session: Session, make_employee) -> None:
    first = make_employee(email="first@company.test")
    second = make_employee(email="second@company.test")
    service = EmployeeDirectoryService(session)

    with pytest.raises(DuplicateEmployeeError):
        service.update_employee(second.emp_id, EmployeeUpdate(email="first@company.test"))

    assert service.get_employee(second.emp_id).email == "second@company.test"
    assert service.get_employee(first.emp_id).email == "first@company.test"


def test_unknown_employee_raises_not_found(session: Session) -> None:
    service = EmployeeDirectoryService(session)

    with pytest.raises(EmployeeNotFoundError) as excinfo:
        service.get_employee(404)
    assert excinfo.value.emp_id == 404

    with pytest.raises(EmployeeNotFoundError):
        service.update_employee(404, EmployeeUpdate(job_title="Ghost"))


def test_listing_on_a_failing_store_raises(broken_session: Session) -> None:
    with pytest.raises(RecordStoreError):
        EmployeeDirectoryService(broken_session).list_employees()
