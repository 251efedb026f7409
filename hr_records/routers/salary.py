"""Salary Adjustments screen."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError, RecordStoreError
from hr_records.core.logger import get_logger
from hr_records.db import get_db_session
from hr_records.routers.views import render_screen
from hr_records.services import SalaryAdjustmentService

router = APIRouter(prefix="/salary", tags=["salary"])
LOGGER = get_logger(__name__)


def _render(request: Request, *, values: dict[str, str], status_code: int = 200, **context) -> HTMLResponse:
    return render_screen(
        request,
        "salary.html",
        active_tab="salary",
        page_title="Salary Adjustments",
        values=values,
        status_code=status_code,
        **context,
    )


@router.get("", response_class=HTMLResponse)
async def salary_form(request: Request) -> HTMLResponse:
    return _render(
        request,
        values={"percentage": "", "min_salary": "", "max_salary": ""},
        result=None,
        error=None,
    )


@router.post("", response_class=HTMLResponse)
async def apply_salary_adjustment(
    request: Request,
    percentage: str = Form(""),
    min_salary: str = Form(""),
    max_salary: str = Form(""),
    session: Session = Depends(get_db_session),
) -> HTMLResponse:
    values = {"percentage": percentage, "min_salary": min_salary, "max_salary": max_salary}
    service = SalaryAdjustmentService(session)
    try:
        result = service.apply(percentage, min_salary, max_salary)
    except InvalidInputError as exc:
        LOGGER.info("Rejected salary adjustment input: %s", exc)
        return _render(request, values=values, result=None, error=str(exc), status_code=422)
    except RecordStoreError as exc:
        return _render(request, values=values, result=None, error=str(exc), status_code=503)

    # A committed adjustment clears the form.
    return _render(
        request,
        values={"percentage": "", "min_salary": "", "max_salary": ""},
        result=result,
        error=None,
    )


__all__ = ["router"]
