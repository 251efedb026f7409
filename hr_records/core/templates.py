# hr_records/core/templates.py
from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from hr_records.core.formatting import format_currency, format_date, format_number

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Single shared templates environment
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

templates.env.filters["currency"] = format_currency
templates.env.filters["number"] = format_number
templates.env.filters["us_date"] = format_date

NAV_TABS: tuple[tuple[str, str, str], ...] = (
    ("employees", "Employee Management", "/employees"),
    ("search", "Search Employees", "/search"),
    ("salary", "Salary Adjustments", "/salary"),
    ("reports", "Reports", "/reports"),
)

templates.env.globals["nav_tabs"] = NAV_TABS
