"""Employee Management screens: directory listing, create and edit forms."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError
from sqlalchemy.orm import Session

from hr_records.core.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    RecordStoreError,
)
from hr_records.core.logger import get_logger
from hr_records.core.paths import with_root_path
from hr_records.db import get_db_session
from hr_records.models import Employee, EmployeeStatus
from hr_records.routers.views import render_screen
from hr_records.schemas import EMPLOYEE_ID_MAX, EmployeeCreate, EmployeeUpdate
from hr_records.services import EmployeeDirectoryService

router = APIRouter(prefix="/employees", tags=["employees"])
LOGGER = get_logger(__name__)

FORM_FIELDS = (
    "first_name",
    "last_name",
    "ssn",
    "email",
    "phone",
    "hire_date",
    "job_title",
    "division",
    "salary",
    "status",
)


def _form_values(employee: Employee | None) -> dict[str, str]:
    if employee is None:
        return {field: "" for field in FORM_FIELDS} | {"status": EmployeeStatus.ACTIVE.value}
    return {
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "ssn": employee.ssn,
        "email": employee.email,
        "phone": employee.phone or "",
        "hire_date": employee.hire_date.isoformat(),
        "job_title": employee.job_title,
        "division": employee.division,
        "salary": str(employee.salary),
        "status": employee.status.value,
    }


async def _submitted_values(request: Request) -> dict[str, str]:
    form = await request.form()
    return {field: str(form.get(field, "")).strip() for field in FORM_FIELDS}


def _validation_messages(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location.replace('_', ' ').capitalize()}: {error.get('msg')}")
    return messages


def _render_form(
    request: Request,
    *,
    values: dict[str, str],
    emp_id: int | None,
    errors: list[str] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    return render_screen(
        request,
        "employees/form.html",
        active_tab="employees",
        page_title="Edit Employee" if emp_id is not None else "Add Employee",
        values=values,
        emp_id=emp_id,
        errors=errors or [],
        statuses=[status.value for status in EmployeeStatus],
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def list_employees(
    request: Request,
    session: Session = Depends(get_db_session),
) -> HTMLResponse:
    service = EmployeeDirectoryService(session)
    error: str | None = None
    employees: list[Employee] = []
    try:
        employees = service.list_employees()
    except RecordStoreError as exc:
        error = str(exc)
    return render_screen(
        request,
        "employees/list.html",
        active_tab="employees",
        page_title="Employee Management",
        employees=employees,
        error=error,
        saved=request.query_params.get("saved"),
        status_code=503 if error else 200,
    )


@router.get("/new", response_class=HTMLResponse)
async def new_employee_form(request: Request) -> HTMLResponse:
    return _render_form(request, values=_form_values(None), emp_id=None)


@router.post("/new")
async def create_employee(
    request: Request,
    session: Session = Depends(get_db_session),
) -> Response:
    values = await _submitted_values(request)
    payload_values: dict[str, Any] = {field: value for field, value in values.items() if value}
    try:
        payload = EmployeeCreate.model_validate(payload_values)
    except ValidationError as exc:
        LOGGER.info("Rejected employee form with %d error(s)", exc.error_count())
        return _render_form(
            request,
            values=values,
            emp_id=None,
            errors=_validation_messages(exc),
            status_code=422,
        )

    service = EmployeeDirectoryService(session)
    try:
        employee = service.create_employee(payload)
    except DuplicateEmployeeError as exc:
        return _render_form(request, values=values, emp_id=None, errors=[str(exc)], status_code=409)
    except RecordStoreError as exc:
        return _render_form(request, values=values, emp_id=None, errors=[str(exc)], status_code=503)

    return RedirectResponse(
        with_root_path(request, f"/employees?saved={employee.emp_id}"), status_code=303
    )


@router.get("/{emp_id}/edit", response_class=HTMLResponse)
async def edit_employee_form(
    request: Request,
    emp_id: int = Path(..., ge=1, le=EMPLOYEE_ID_MAX),
    session: Session = Depends(get_db_session),
) -> HTMLResponse:
    service = EmployeeDirectoryService(session)
    try:
        employee = service.get_employee(emp_id)
    except EmployeeNotFoundError as exc:
        return render_screen(
            request,
            "employees/list.html",
            active_tab="employees",
            page_title="Employee Management",
            employees=[],
            error=str(exc),
            saved=None,
            status_code=404,
        )
    except RecordStoreError as exc:
        return _render_form(request, values=_form_values(None), emp_id=emp_id, errors=[str(exc)], status_code=503)
    return _render_form(request, values=_form_values(employee), emp_id=emp_id)


@router.post("/{emp_id}/edit")
async def update_employee(
    request: Request,
    emp_id: int = Path(..., ge=1, le=EMPLOYEE_ID_MAX),
    session: Session = Depends(get_db_session),
) -> Response:
    values = await _submitted_values(request)
    payload_values: dict[str, Any] = {
        field: value for field, value in values.items() if value or field == "phone"
    }
    if not payload_values.get("phone"):
        payload_values["phone"] = None
    try:
        patch = EmployeeUpdate.model_validate(payload_values)
    except ValidationError as exc:
        LOGGER.info("Rejected employee form with %d error(s)", exc.error_count())
        return _render_form(
            request,
            values=values,
            emp_id=emp_id,
            errors=_validation_messages(exc),
            status_code=422,
        )

    service = EmployeeDirectoryService(session)
    try:
        service.update_employee(emp_id, patch)
    except EmployeeNotFoundError as exc:
        return _render_form(request, values=values, emp_id=emp_id, errors=[str(exc)], status_code=404)
    except DuplicateEmployeeError as exc:
        return _render_form(request, values=values, emp_id=emp_id, errors=[str(exc)], status_code=409)
    except RecordStoreError as exc:
        return _render_form(request, values=values, emp_id=emp_id, errors=[str(exc)], status_code=503)

    return RedirectResponse(with_root_path(request, f"/employees?saved={emp_id}"), status_code=303)


__all__ = ["router"]
