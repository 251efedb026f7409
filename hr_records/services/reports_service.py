"""Pay reports: employee pay history and monthly totals by job title or division."""
from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Literal

from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError
from hr_records.core.logger import get_logger, timeit
from hr_records.repositories import EmployeeRepository, PayRow, PayStatementRepository
from hr_records.schemas import EmployeePayHistory, PayGroup, PayReport, PayStatementEntry

from .aggregation import group_sum_count
from .base import store_errors

LOGGER = get_logger(__name__)

GroupBy = Literal["job_title", "division"]

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True)
class MonthPeriod:
    """A calendar month expressed as an inclusive date range."""

    year: int
    month: int

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    @classmethod
    def parse(cls, value: str | None, *, today: date | None = None) -> "MonthPeriod":
        """Parse ``YYYY-MM``; a blank value selects the month containing ``today``."""

        if value is None or not value.strip():
            current = today or date.today()
            return cls(year=current.year, month=current.month)
        match = _MONTH_PATTERN.match(value.strip())
        if match is None:
            raise InvalidInputError("Month must use the YYYY-MM format.")
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12 or year < 1:
            raise InvalidInputError("Month must use the YYYY-MM format.")
        return cls(year=year, month=month)


class ReportsService:
    """Build pay reports from the record store."""

    def __init__(self, session: Session) -> None:
        self._employees = EmployeeRepository(session)
        self._statements = PayStatementRepository(session)

    def pay_by_job_title(self, month: str | None, *, today: date | None = None) -> PayReport:
        return self._pay_report("job_title", MonthPeriod.parse(month, today=today))

    def pay_by_division(self, month: str | None, *, today: date | None = None) -> PayReport:
        return self._pay_report("division", MonthPeriod.parse(month, today=today))

    def _pay_report(self, group_by: GroupBy, period: MonthPeriod) -> PayReport:
        with timeit(f"Pay by {group_by} report for {period.key}", logger=LOGGER, unit="rows") as timer:
            with store_errors("pay report", LOGGER):
                rows = self._statements.fetch_pay_rows(period.start, period.end)
            timer.add(len(rows))

        def _key(row: PayRow) -> str:
            return getattr(row, group_by)

        groups = [
            PayGroup(key=group.key, total_pay=group.total, employee_count=group.count)
            for group in group_sum_count(rows, key=_key, value=lambda row: row.gross_pay)
        ]
        return PayReport(
            group_by=group_by,
            month=period.key,
            month_label=period.label,
            period_start=period.start,
            period_end=period.end,
            groups=groups,
        )

    def employee_pay_history(self, *, limit_per_employee: int = 5) -> list[EmployeePayHistory]:
        """Every employee with their latest statements, newest period first."""

        if limit_per_employee <= 0:
            raise InvalidInputError("History limit must be a positive integer.")
        with store_errors("employee pay history", LOGGER):
            employees = self._employees.list_all()
            history = self._statements.history_for(
                (employee.emp_id for employee in employees),
                limit_per_employee=limit_per_employee,
            )

        LOGGER.debug("Loaded pay history for %d employee(s)", len(employees))
        return [
            EmployeePayHistory(
                emp_id=employee.emp_id,
                name=employee.full_name,
                job_title=employee.job_title,
                division=employee.division,
                salary=employee.salary,
                status=employee.status.value,
                statements=[
                    PayStatementEntry(
                        id=statement.id,
                        pay_period_start=statement.pay_period_start,
                        pay_period_end=statement.pay_period_end,
                        gross_pay=statement.gross_pay,
                        deductions=statement.deductions,
                        net_pay=statement.net_pay,
                    )
                    for statement in history.get(employee.emp_id, [])
                ],
            )
            for employee in employees
        ]
