"""Simple database connectivity check."""
from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import func, select, text

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hr_records.core.config import get_settings  # noqa: E402  (import after sys.path manipulation)
from hr_records.db.engine import create_sync_engine  # noqa: E402
from hr_records.models import Employee, PayStatement  # noqa: E402

settings = get_settings()
engine = create_sync_engine()


def main() -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
        employees = conn.execute(select(func.count()).select_from(Employee)).scalar()
        statements = conn.execute(select(func.count()).select_from(PayStatement)).scalar()
        print(
            "Connected to {url}: {employees} employee(s), {statements} pay statement(s)".format(
                url=settings.database.masked_url,
                employees=employees,
                statements=statements,
            )
        )


if __name__ == "__main__":
    main()
