"""Search Employees screen."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError, RecordStoreError
from hr_records.core.logger import get_logger
from hr_records.db import get_db_session
from hr_records.models import Employee
from hr_records.routers.views import render_screen
from hr_records.schemas import SearchField
from hr_records.services import EmployeeSearchService

router = APIRouter(prefix="/search", tags=["search"])
LOGGER = get_logger(__name__)


@router.get("", response_class=HTMLResponse)
async def search_employees(
    request: Request,
    session: Session = Depends(get_db_session),
) -> HTMLResponse:
    term = (request.query_params.get("term") or "").strip()
    field = request.query_params.get("field") or SearchField.NAME.value

    results: list[Employee] | None = None
    error: str | None = None
    status_code = 200
    if term:
        try:
            results = EmployeeSearchService(session).search(term, field)
        except InvalidInputError as exc:
            error = str(exc)
            status_code = 422
        except RecordStoreError as exc:
            error = str(exc)
            status_code = 503

    return render_screen(
        request,
        "search.html",
        active_tab="search",
        page_title="Search Employees",
        term=term,
        field=field,
        fields=list(SearchField),
        results=results,
        error=error,
        status_code=status_code,
    )


__all__ = ["router"]
