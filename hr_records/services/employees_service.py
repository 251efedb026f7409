"""Employee directory: list, fetch, create and edit employee records."""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hr_records.core.exceptions import DuplicateEmployeeError, EmployeeNotFoundError
from hr_records.core.logger import get_logger
from hr_records.models import Employee
from hr_records.repositories import EmployeeRepository
from hr_records.schemas import EmployeeCreate, EmployeeUpdate

from .base import store_errors

LOGGER = get_logger(__name__)

DUPLICATE_MESSAGE = "An employee with this SSN or email already exists."


class EmployeeDirectoryService:
    """Field-level CRUD over employee records."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repository = EmployeeRepository(session)

    def list_employees(self) -> list[Employee]:
        with store_errors("employee listing", LOGGER):
            return self._repository.list_all()

    def get_employee(self, emp_id: int) -> Employee:
        with store_errors("employee lookup", LOGGER):
            employee = self._repository.get(emp_id)
        if employee is None:
            LOGGER.warning("Employee %s not found", emp_id)
            raise EmployeeNotFoundError(emp_id)
        return employee

    def create_employee(self, payload: EmployeeCreate) -> Employee:
        with store_errors("employee creation", LOGGER):
            try:
                employee = self._repository.add(payload.model_dump())
                self._session.commit()
            except IntegrityError as exc:
                self._session.rollback()
                LOGGER.info("Rejected duplicate employee ssn/email")
                raise DuplicateEmployeeError(DUPLICATE_MESSAGE) from exc
            except Exception:
                self._session.rollback()
                raise
            self._session.refresh(employee)
        LOGGER.info("Created employee %s", employee.emp_id)
        return employee

    def update_employee(self, emp_id: int, patch: EmployeeUpdate) -> Employee:
        employee = self.get_employee(emp_id)
        changes = patch.changes()
        if not changes:
            return employee
        with store_errors("employee update", LOGGER):
            try:
                self._repository.apply(employee, changes)
                self._session.commit()
            except IntegrityError as exc:
                self._session.rollback()
                LOGGER.info("Rejected update of employee %s: duplicate ssn/email", emp_id)
                raise DuplicateEmployeeError(DUPLICATE_MESSAGE) from exc
            except Exception:
                self._session.rollback()
                raise
            self._session.refresh(employee)
        LOGGER.info("Updated employee %s (%s)", emp_id, ", ".join(sorted(changes)))
        return employee
