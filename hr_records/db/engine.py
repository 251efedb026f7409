"""Database engine factories."""
from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from hr_records.core.config import get_settings
from hr_records.core.logger import get_logger

LOGGER = get_logger(__name__)


def get_sqlalchemy_url() -> str:
    """Return the configured SQLAlchemy URL."""

    settings = get_settings()
    return settings.database.sqlalchemy_url


def create_sync_engine(url: str | None = None, **kwargs: Any) -> Engine:
    """Create a synchronous SQLAlchemy engine using configured defaults."""

    settings = get_settings()
    resolved_url = url or settings.database.sqlalchemy_url

    options = dict(kwargs)
    options.setdefault("echo", settings.sqlalchemy_echo)
    if resolved_url.startswith("sqlite"):
        options.setdefault("connect_args", {"check_same_thread": False})
        if resolved_url in {"sqlite://", "sqlite:///:memory:"}:
            options.setdefault("poolclass", StaticPool)
    else:
        options.setdefault("pool_pre_ping", True)

    masked_url = settings.database.masked_url if url is None else resolved_url.split("@")[-1]
    LOGGER.debug("Creating SQLAlchemy engine", extra={"url": masked_url, "options": options})
    return create_engine(resolved_url, future=True, **options)
