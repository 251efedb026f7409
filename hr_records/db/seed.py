"""Schema creation and sample data for local development."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from hr_records.core.logger import get_logger
from hr_records.models import Base, Employee, PayStatement

LOGGER = get_logger(__name__)

# (first, last, ssn, email, phone, hire_date, job_title, division, salary)
SAMPLE_EMPLOYEES: tuple[tuple[str, str, str, str, str, str, str, str, int], ...] = (
    ("John", "Smith", "123456789", "john.smith@company2.com", "555-0101", "2022-01-15", "Software Engineer", "Engineering", 75000),
    ("Sarah", "Johnson", "234567890", "sarah.johnson@company2.com", "555-0102", "2021-06-20", "Marketing Manager", "Marketing", 68000),
    ("Michael", "Brown", "345678901", "michael.brown@company2.com", "555-0103", "2023-03-10", "Sales Representative", "Sales", 52000),
    ("Emily", "Davis", "456789012", "emily.davis@company2.com", "555-0104", "2020-08-05", "HR Director", "Human Resources", 85000),
    ("David", "Wilson", "567890123", "david.wilson@company2.com", "555-0105", "2022-11-30", "Accountant", "Finance", 62000),
    ("Lisa", "Miller", "678901234", "lisa.miller@company2.com", "555-0106", "2021-04-12", "Project Manager", "Engineering", 78000),
    ("James", "Garcia", "789012345", "james.garcia@company2.com", "555-0107", "2023-01-08", "Customer Support", "Operations", 45000),
    ("Jennifer", "Martinez", "890123456", "jennifer.martinez@company2.com", "555-0108", "2020-12-01", "Senior Developer", "Engineering", 95000),
)

# Semi-monthly (gross, deductions, net) per employee, in SAMPLE_EMPLOYEES order.
SAMPLE_SEMI_MONTHLY_PAY: tuple[tuple[str, str, str], ...] = (
    ("2884.62", "576.92", "2307.70"),
    ("2615.38", "523.08", "2092.30"),
    ("2000.00", "400.00", "1600.00"),
    ("3269.23", "653.85", "2615.38"),
    ("2384.62", "476.92", "1907.70"),
    ("3000.00", "600.00", "2400.00"),
    ("1730.77", "346.15", "1384.62"),
    ("3653.85", "730.77", "2923.08"),
)

SAMPLE_PERIODS: tuple[tuple[date, date], ...] = (
    (date(2024, 1, 1), date(2024, 1, 15)),
    (date(2024, 1, 16), date(2024, 1, 31)),
)


def create_schema(engine: Engine) -> None:
    """Create the ``employees`` and ``pay_statements`` tables if missing."""

    Base.metadata.create_all(engine)
    LOGGER.info("Schema ready", extra={"tables": sorted(Base.metadata.tables)})


def seed_sample_data(session: Session) -> int:
    """Insert the sample employees and their January 2024 pay statements.

    Employees whose SSN already exists are skipped. Returns the number of
    employees inserted.
    """

    existing = set(session.scalars(select(Employee.ssn)))
    inserted = 0
    for row, pay in zip(SAMPLE_EMPLOYEES, SAMPLE_SEMI_MONTHLY_PAY):
        first, last, ssn, email, phone, hired, title, division, salary = row
        if ssn in existing:
            continue
        gross, deductions, net = (Decimal(value) for value in pay)
        employee = Employee(
            first_name=first,
            last_name=last,
            ssn=ssn,
            email=email,
            phone=phone,
            hire_date=date.fromisoformat(hired),
            job_title=title,
            division=division,
            salary=Decimal(salary),
        )
        employee.pay_statements = [
            PayStatement(
                pay_period_start=start,
                pay_period_end=end,
                gross_pay=gross,
                deductions=deductions,
                net_pay=net,
            )
            for start, end in SAMPLE_PERIODS
        ]
        session.add(employee)
        inserted += 1
    session.flush()
    total = session.scalar(select(func.count()).select_from(Employee)) or 0
    LOGGER.info("Seeded %d employee(s); %d on file", inserted, total)
    return inserted
