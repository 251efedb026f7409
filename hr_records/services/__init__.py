"""Service layer entrypoints for domain logic."""

from .aggregation import GroupTotal, group_sum_count
from .employees_service import EmployeeDirectoryService
from .reports_service import MonthPeriod, ReportsService
from .salary_service import SalaryAdjustmentService, adjusted_salary
from .search_service import EmployeeSearchService

__all__ = [
    "EmployeeDirectoryService",
    "EmployeeSearchService",
    "GroupTotal",
    "MonthPeriod",
    "ReportsService",
    "SalaryAdjustmentService",
    "adjusted_salary",
    "group_sum_count",
]
