"""JSON API over the directory, search, salary adjustment and report operations."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from hr_records.core.config import get_settings
from hr_records.core.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    HRRecordsError,
    InvalidInputError,
    RecordStoreError,
)
from hr_records.core.logger import get_logger
from hr_records.db import get_db_session
from hr_records.schemas import (
    EMPLOYEE_ID_MAX,
    EmployeeCreate,
    EmployeePayHistory,
    EmployeeRead,
    EmployeeUpdate,
    PayReport,
    SalaryAdjustmentRequest,
    SalaryAdjustmentResult,
    SearchField,
)
from hr_records.services import (
    EmployeeDirectoryService,
    EmployeeSearchService,
    ReportsService,
    SalaryAdjustmentService,
)

router = APIRouter(prefix="/api", tags=["api"])
LOGGER = get_logger(__name__)


def _http_error(exc: HRRecordsError) -> HTTPException:
    """Map a domain error onto the HTTP status the API reports for it."""

    if isinstance(exc, InvalidInputError):
        code = 422
    elif isinstance(exc, EmployeeNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, DuplicateEmployeeError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, RecordStoreError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(exc))


@router.get("/employees", response_model=list[EmployeeRead])
def list_employees(session: Session = Depends(get_db_session)) -> list[EmployeeRead]:
    try:
        employees = EmployeeDirectoryService(session).list_employees()
    except HRRecordsError as exc:
        raise _http_error(exc) from exc
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.post(
    "/employees",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
)
def create_employee(
    payload: EmployeeCreate,
    session: Session = Depends(get_db_session),
) -> EmployeeRead:
    try:
        employee = EmployeeDirectoryService(session).create_employee(payload)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc
    return EmployeeRead.model_validate(employee)


@router.get("/employees/search", response_model=list[EmployeeRead])
def search_employees(
    term: str = Query(..., description="Name fragment, SSN or employee id"),
    field: SearchField = Query(SearchField.NAME),
    session: Session = Depends(get_db_session),
) -> list[EmployeeRead]:
    try:
        results = EmployeeSearchService(session).search(term, field)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc
    return [EmployeeRead.model_validate(employee) for employee in results]


@router.get("/employees/{emp_id}", response_model=EmployeeRead)
def get_employee(
    emp_id: int = Path(..., ge=1, le=EMPLOYEE_ID_MAX),
    session: Session = Depends(get_db_session),
) -> EmployeeRead:
    try:
        employee = EmployeeDirectoryService(session).get_employee(emp_id)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc
    return EmployeeRead.model_validate(employee)


@router.patch("/employees/{emp_id}", response_model=EmployeeRead)
def update_employee(
    patch: EmployeeUpdate,
    emp_id: int = Path(..., ge=1, le=EMPLOYEE_ID_MAX),
    session: Session = Depends(get_db_session),
) -> EmployeeRead:
    try:
        employee = EmployeeDirectoryService(session).update_employee(emp_id, patch)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc
    return EmployeeRead.model_validate(employee)


@router.post("/salary-adjustments", response_model=SalaryAdjustmentResult)
def apply_salary_adjustment(
    request: SalaryAdjustmentRequest,
    session: Session = Depends(get_db_session),
) -> SalaryAdjustmentResult:
    try:
        return SalaryAdjustmentService(session).apply(
            request.percentage, request.min_salary, request.max_salary
        )
    except HRRecordsError as exc:
        raise _http_error(exc) from exc


@router.get("/reports/pay-by-title", response_model=PayReport)
def pay_by_job_title(
    month: str | None = Query(None, description="Calendar month as YYYY-MM"),
    session: Session = Depends(get_db_session),
) -> PayReport:
    try:
        return ReportsService(session).pay_by_job_title(month)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc


@router.get("/reports/pay-by-division", response_model=PayReport)
def pay_by_division(
    month: str | None = Query(None, description="Calendar month as YYYY-MM"),
    session: Session = Depends(get_db_session),
) -> PayReport:
    try:
        return ReportsService(session).pay_by_division(month)
    except HRRecordsError as exc:
        raise _http_error(exc) from exc


@router.get("/reports/employee-pay", response_model=list[EmployeePayHistory])
def employee_pay_history(
    limit: int | None = Query(None, ge=1, le=100),
    session: Session = Depends(get_db_session),
) -> list[EmployeePayHistory]:
    try:
        return ReportsService(session).employee_pay_history(
            limit_per_employee=limit or get_settings().pay_history_limit
        )
    except HRRecordsError as exc:
        raise _http_error(exc) from exc


__all__ = ["router"]
