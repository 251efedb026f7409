"""Shared fixtures: in-memory SQLite record store and employee factories."""
from __future__ import annotations

import os
from datetime import date
from decimal import Decimal
from itertools import count
from typing import Callable, Iterator

import pytest

os.environ["LOG_DIR"] = ""
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hr_records.core.logger import shutdown_logging  # noqa: E402
from hr_records.db import get_db_session  # noqa: E402
from hr_records.main import create_app  # noqa: E402
from hr_records.models import Base, Employee, EmployeeStatus, PayStatement  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _flush_logging() -> Iterator[None]:
    yield
    shutdown_logging()


def _memory_engine() -> Engine:
    return create_engine(
        "sqlite://",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = _memory_engine()
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def session(session_factory: sessionmaker) -> Iterator[Session]:
    """Provide an in-memory database session for each test."""

    with session_factory() as session:
        yield session


@pytest.fixture()
def broken_session() -> Iterator[Session]:
    """A session whose database has no tables, so every query fails."""

    engine = _memory_engine()
    with sessionmaker(bind=engine)() as session:
        yield session
    engine.dispose()


@pytest.fixture()
def make_employee(session: Session) -> Callable[..., Employee]:
    sequence = count(1)

    def _make(**overrides: object) -> Employee:
        n = next(sequence)
        values: dict[str, object] = {
            "first_name": f"First{n}",
            "last_name": f"Last{n}",
            "ssn": f"{100000000 + n}",
            "email": f"employee{n}@company.test",
            "phone": f"555-01{n:02d}",
            "hire_date": date(2022, 1, 1),
            "job_title": "Engineer",
            "division": "Engineering",
            "salary": Decimal("50000"),
            "status": EmployeeStatus.ACTIVE,
        }
        values.update(overrides)
        employee = Employee(**values)
        session.add(employee)
        session.commit()
        return employee

    return _make


@pytest.fixture()
def make_statement(session: Session) -> Callable[..., PayStatement]:
    def _make(
        employee: Employee,
        start: date,
        end: date,
        gross: str = "1000.00",
        deductions: str = "200.00",
    ) -> PayStatement:
        gross_pay = Decimal(gross)
        deduction_total = Decimal(deductions)
        statement = PayStatement(
            emp_id=employee.emp_id,
            pay_period_start=start,
            pay_period_end=end,
            gross_pay=gross_pay,
            deductions=deduction_total,
            net_pay=gross_pay - deduction_total,
        )
        session.add(statement)
        session.commit()
        return statement

    return _make


def _client_for(factory: Callable[[], Session]) -> Iterator[TestClient]:
    app = create_app()

    def _override() -> Iterator[Session]:
        with factory() as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = _override
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    """HTTP client whose requests share the in-memory record store."""

    yield from _client_for(session_factory)


@pytest.fixture()
def broken_client() -> Iterator[TestClient]:
    """HTTP client backed by a store that fails every query."""

    engine = _memory_engine()
    yield from _client_for(sessionmaker(bind=engine))
    engine.dispose()
