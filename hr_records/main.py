"""FastAPI application instance and lifecycle hooks."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from hr_records.core import get_logger, get_settings
from hr_records.core.logger import init_logging, shutdown_logging
from hr_records.core.paths import with_root_path
from hr_records.routers import (
    api_router,
    employees_router,
    reports_router,
    salary_router,
    search_router,
)

LOGGER = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_logging(get_settings())
    LOGGER.info("%s ready", app.title)
    yield
    LOGGER.info("%s shutting down", app.title)
    shutdown_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    init_logging(settings)

    app = FastAPI(title=settings.app_title, version="0.1.0", lifespan=lifespan)
    app.include_router(employees_router)
    app.include_router(search_router)
    app.include_router(salary_router)
    app.include_router(reports_router)
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def root_redirect(request: Request) -> RedirectResponse:
        return RedirectResponse(url=with_root_path(request, "/employees"))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    LOGGER.info("FastAPI application initialised")
    return app


app = create_app()
