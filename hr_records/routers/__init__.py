"""FastAPI routers for the HR records application."""

from .api import router as api_router
from .employees import router as employees_router
from .reports import router as reports_router
from .salary import router as salary_router
from .search import router as search_router

__all__ = [
    "api_router",
    "employees_router",
    "reports_router",
    "salary_router",
    "search_router",
]
