"""Tests for the monthly pay reports and the pay history report."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from hr_records.core.exceptions import InvalidInputError, RecordStoreError
from hr_records.services import MonthPeriod, ReportsService


@pytest.fixture()
def january_payroll(make_employee, make_statement):
    engineer = make_employee(job_title="Software Engineer", division="Engineering")
    manager = make_employee(job_title="Project Manager", division="Engineering")
    accountant = make_employee(job_title="Accountant", division="Finance")
    for employee, gross in ((engineer, "2884.62"), (manager, "3000.00"), (accountant, "2384.62")):
        make_statement(employee, date(2024, 1, 1), date(2024, 1, 15), gross=gross)
        make_statement(employee, date(2024, 1, 16), date(2024, 1, 31), gross=gross)
    # Straddles the month boundary, so it belongs to neither month.
    make_statement(engineer, date(2024, 1, 25), date(2024, 2, 8), gross="9999.00")
    make_statement(engineer, date(2024, 2, 1), date(2024, 2, 15), gross="2884.62")
    return engineer, manager, accountant


def test_pay_by_job_title_for_january(session: Session, january_payroll) -> None:
    report = ReportsService(session).pay_by_job_title("2024-01")

    assert report.month == "2024-01"
    assert report.month_label == "January 2024"
    assert report.period_start == date(2024, 1, 1)
    assert report.period_end == date(2024, 1, 31)
    assert [(g.key, g.total_pay, g.employee_count) for g in report.groups] == [
        ("Accountant", Decimal("4769.24"), 2),
        ("Project Manager", Decimal("6000.00"), 2),
        ("Software Engineer", Decimal("5769.24"), 2),
    ]
    assert report.total_pay == Decimal("16538.48")


def test_average_pay_rounds_half_up(session: Session, january_payroll) -> None:
    report = ReportsService(session).pay_by_job_title("2024-01")

    averages = {group.key: group.average_pay for group in report.groups}

    assert averages == {
        "Accountant": Decimal("2385"),
        "Project Manager": Decimal("3000"),
        "Software Engineer": Decimal("2885"),
    }


def test_pay_by_division_sorts_groups_by_key(session: Session, january_payroll) -> None:
    report = ReportsService(session).pay_by_division("2024-01")

    assert report.group_by == "division"
    assert [(g.key, g.total_pay, g.employee_count) for g in report.groups] == [
        ("Engineering", Decimal("11769.24"), 4),
        ("Finance", Decimal("4769.24"), 2),
    ]


def test_month_without_statements_is_empty(session: Session, january_payroll) -> None:
    report = ReportsService(session).pay_by_division("2023-12")

    assert report.is_empty
    assert report.total_pay == Decimal("0")


def test_blank_month_selects_the_current_month(session: Session, january_payroll) -> None:
    report = ReportsService(session).pay_by_job_title("  ", today=date(2024, 2, 20))

    assert report.month == "2024-02"
    assert [(g.key, g.total_pay) for g in report.groups] == [
        ("Software Engineer", Decimal("2884.62")),
    ]


@pytest.mark.parametrize("month", ["2024-13", "2024-00", "2024/01", "Jan 2024", "24-01", "2024-1"])
def test_malformed_month_fails_validation(broken_session: Session, month: str) -> None:
    with pytest.raises(InvalidInputError):
        ReportsService(broken_session).pay_by_job_title(month)


def test_store_failure_is_reported(broken_session: Session) -> None:
    with pytest.raises(RecordStoreError):
        ReportsService(broken_session).pay_by_division("2024-01")


@pytest.mark.parametrize(
    ("value", "end", "label"),
    [
        ("2024-02", date(2024, 2, 29), "February 2024"),
        ("2023-02", date(2023, 2, 28), "February 2023"),
        ("2024-04", date(2024, 4, 30), "April 2024"),
        ("2024-12", date(2024, 12, 31), "December 2024"),
    ],
)
def test_month_period_bounds(value: str, end: date, label: str) -> None:
    period = MonthPeriod.parse(value)

    assert period.key == value
    assert period.start == date(end.year, end.month, 1)
    assert period.end == end
    assert period.label == label


def test_pay_history_is_newest_first_and_limited(
    session: Session, make_employee, make_statement
) -> None:
    busy = make_employee(first_name="Lisa", last_name="Miller")
    idle = make_employee(first_name="James", last_name="Garcia")
    for month in range(1, 8):
        make_statement(busy, date(2024, month, 1), date(2024, month, 15))

    history = ReportsService(session).employee_pay_history(limit_per_employee=5)

    assert [entry.emp_id for entry in history] == [busy.emp_id, idle.emp_id]
    assert history[0].name == "Lisa Miller"
    assert [s.pay_period_start.month for s in history[0].statements] == [7, 6, 5, 4, 3]
    assert history[1].statements == []


def test_pay_history_rejects_non_positive_limit(session: Session) -> None:
    with pytest.raises(InvalidInputError):
        ReportsService(session).employee_pay_history(limit_per_employee=0)
