"""Reports screen: employee pay history and monthly pay by job title/division."""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from hr_records.core.config import get_settings
from hr_records.core.exceptions import InvalidInputError, RecordStoreError
from hr_records.core.logger import get_logger
from hr_records.db import get_db_session
from hr_records.routers.views import render_screen
from hr_records.services import MonthPeriod, ReportsService

router = APIRouter(prefix="/reports", tags=["reports"])
LOGGER = get_logger(__name__)

REPORT_TABS: tuple[tuple[str, str], ...] = (
    ("employee-pay", "Employee Pay History"),
    ("pay-by-title", "Pay by Job Title"),
    ("pay-by-division", "Pay by Division"),
)
DEFAULT_REPORT = REPORT_TABS[0][0]


@router.get("", response_class=HTMLResponse)
async def reports(
    request: Request,
    session: Session = Depends(get_db_session),
) -> HTMLResponse:
    report = request.query_params.get("report") or DEFAULT_REPORT
    if report not in dict(REPORT_TABS):
        report = DEFAULT_REPORT
    month = (request.query_params.get("month") or "").strip()
    if not month:
        month = MonthPeriod.parse(None, today=date.today()).key

    service = ReportsService(session)
    history = None
    pay_report = None
    error: str | None = None
    status_code = 200
    try:
        if report == "employee-pay":
            history = service.employee_pay_history(
                limit_per_employee=get_settings().pay_history_limit
            )
        elif report == "pay-by-title":
            pay_report = service.pay_by_job_title(month)
        else:
            pay_report = service.pay_by_division(month)
    except InvalidInputError as exc:
        error = str(exc)
        status_code = 422
    except RecordStoreError as exc:
        error = str(exc)
        status_code = 503

    return render_screen(
        request,
        "reports.html",
        active_tab="reports",
        page_title="Reports",
        report=report,
        report_tabs=REPORT_TABS,
        month=month,
        history=history,
        pay_report=pay_report,
        error=error,
        status_code=status_code,
    )


__all__ = ["router"]
