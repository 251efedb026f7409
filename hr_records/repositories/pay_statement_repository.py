"""Data access for pay statements and the report projections built on them."""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy import select

from hr_records.models import Employee, PayStatement

from .base import BaseRepository


@dataclass(frozen=True)
class PayRow:
    """Gross pay of one statement joined with its employee's grouping columns."""

    gross_pay: Decimal
    job_title: str
    division: str


class PayStatementRepository(BaseRepository):
    """Repository encapsulating pay statement queries."""

    def fetch_pay_rows(self, start: date, end: date) -> list[PayRow]:
        """Return statements whose period lies entirely within ``[start, end]``."""

        statement = (
            select(PayStatement.gross_pay, Employee.job_title, Employee.division)
            .join(Employee, Employee.emp_id == PayStatement.emp_id)
            .where(
                PayStatement.pay_period_start >= start,
                PayStatement.pay_period_end <= end,
            )
            .order_by(PayStatement.id)
        )
        result = self._session.execute(statement)
        return [
            PayRow(
                gross_pay=self._to_decimal(row.gross_pay),
                job_title=str(row.job_title),
                division=str(row.division),
            )
            for row in result
        ]

    def history_for(
        self,
        emp_ids: Iterable[int],
        *,
        limit_per_employee: int,
    ) -> dict[int, list[PayStatement]]:
        """Return the most recent statements per employee, newest first."""

        ids = list(emp_ids)
        if not ids:
            return {}
        statement = (
            select(PayStatement)
            .where(PayStatement.emp_id.in_(ids))
            .order_by(
                PayStatement.emp_id,
                PayStatement.pay_period_start.desc(),
                PayStatement.id.desc(),
            )
        )
        history: dict[int, list[PayStatement]] = defaultdict(list)
        for pay_statement in self._session.scalars(statement):
            bucket = history[pay_statement.emp_id]
            if len(bucket) < limit_per_employee:
                bucket.append(pay_statement)
        return dict(history)
