"""Employee search by name, SSN or employee id."""
from __future__ import annotations

from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError
from hr_records.core.logger import get_logger
from hr_records.models import Employee
from hr_records.repositories import EmployeeRepository
from hr_records.schemas import EMPLOYEE_ID_MAX, SearchField

from .base import store_errors

LOGGER = get_logger(__name__)


def parse_search_field(value: str | SearchField | None) -> SearchField:
    if isinstance(value, SearchField):
        return value
    if not value:
        return SearchField.NAME
    try:
        return SearchField(value.strip().lower())
    except ValueError as exc:
        raise InvalidInputError(f"Unknown search field '{value}'.") from exc


def parse_employee_id(term: str) -> int:
    """Parse an employee id search term, rejecting anything but digits."""

    if not (term.isascii() and term.isdigit()):
        raise InvalidInputError("Employee ID must be a whole number.")
    emp_id = int(term)
    if emp_id > EMPLOYEE_ID_MAX:
        raise InvalidInputError(f"Employee ID must be at most {EMPLOYEE_ID_MAX}.")
    return emp_id


class EmployeeSearchService:
    """Translate a search term and field into a record store filter."""

    def __init__(self, session: Session) -> None:
        self._repository = EmployeeRepository(session)

    def search(self, term: str, field: str | SearchField = SearchField.NAME) -> list[Employee]:
        search_field = parse_search_field(field)
        cleaned = (term or "").strip()
        if not cleaned:
            raise InvalidInputError("Enter a search term.")

        emp_id = parse_employee_id(cleaned) if search_field is SearchField.EMP_ID else None

        LOGGER.debug("Searching employees by %s", search_field.value)
        with store_errors("employee search", LOGGER):
            if search_field is SearchField.NAME:
                results = self._repository.search_by_name(cleaned)
            elif search_field is SearchField.SSN:
                results = self._repository.search_by_ssn(cleaned)
            else:
                results = self._repository.search_by_id(emp_id)

        LOGGER.info(
            "Employee search by %s returned %d result(s)", search_field.value, len(results)
        )
        return results
