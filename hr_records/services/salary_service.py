"""Bulk percentage salary increases over a salary band."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError, SalaryAdjustmentError
from hr_records.core.logger import get_logger, log_context, timeit
from hr_records.repositories import EmployeeRepository
from hr_records.schemas import SalaryAdjustmentResult, SalaryChange

LOGGER = get_logger(__name__)

MAX_PERCENTAGE = Decimal("100")
NO_MATCH_MESSAGE = "No employees found in the specified salary range."


def _to_decimal(value: object, label: str) -> Decimal:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidInputError(f"{label} must be a number.") from exc
    if not number.is_finite():
        raise InvalidInputError(f"{label} must be a number.")
    return number


def adjusted_salary(salary: Decimal, percentage: Decimal) -> Decimal:
    """Return ``salary`` raised by ``percentage`` percent, rounded to a whole unit."""

    raised = salary * (1 + percentage / 100)
    return raised.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_percentage(percentage: Decimal) -> str:
    return format(percentage.normalize(), "f")


class SalaryAdjustmentService:
    """Apply a percentage increase to every employee with ``min <= salary < max``.

    The whole batch commits in one transaction. Any store failure rolls back
    every change and raises ``SalaryAdjustmentError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repository = EmployeeRepository(session)

    @staticmethod
    def validate(
        percentage: object, min_salary: object, max_salary: object
    ) -> tuple[Decimal, Decimal, Decimal]:
        pct = _to_decimal(percentage, "Percentage")
        low = _to_decimal(min_salary, "Minimum salary")
        high = _to_decimal(max_salary, "Maximum salary")
        if pct < 0 or pct > MAX_PERCENTAGE:
            raise InvalidInputError("Percentage must be between 0 and 100.")
        if low < 0:
            raise InvalidInputError("Minimum salary cannot be negative.")
        if high <= low:
            raise InvalidInputError("Maximum salary must be greater than minimum salary.")
        return pct, low, high

    def apply(
        self,
        percentage: object,
        min_salary: object,
        max_salary: object,
    ) -> SalaryAdjustmentResult:
        pct, low, high = self.validate(percentage, min_salary, max_salary)
        pct_text = format_percentage(pct)

        with log_context.scope(operation="salary_adjustment"), timeit(
            "Salary adjustment", logger=LOGGER, unit="employees"
        ) as timer:
            LOGGER.debug("Adjusting salaries in [%s, %s) by %s%%", low, high, pct_text)
            changes: list[SalaryChange] = []
            try:
                employees = self._repository.in_salary_range(low, high, lock=True)
                for employee in employees:
                    old_salary = employee.salary
                    new_salary = adjusted_salary(old_salary, pct)
                    employee.salary = new_salary
                    changes.append(
                        SalaryChange(
                            emp_id=employee.emp_id,
                            name=employee.full_name,
                            old_salary=old_salary,
                            new_salary=new_salary,
                        )
                    )
                self._session.commit()
            except SQLAlchemyError as exc:
                self._session.rollback()
                LOGGER.exception(
                    "Salary adjustment rolled back after %d pending update(s)", len(changes)
                )
                raise SalaryAdjustmentError(
                    "Error updating salaries. No salaries were changed."
                ) from exc
            timer.add(len(changes))

        if not changes:
            message = NO_MATCH_MESSAGE
        else:
            message = (
                f"Successfully updated {len(changes)} employee(s) "
                f"with a {pct_text}% salary increase."
            )
        LOGGER.info(message)
        return SalaryAdjustmentResult(
            affected=len(changes),
            message=message,
            percentage=pct,
            min_salary=low,
            max_salary=high,
            changes=changes,
        )
