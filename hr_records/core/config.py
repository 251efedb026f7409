"""Configuration loaded from environment variables."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(slots=True)
class DatabaseSettings:
    """Connection details for the record store."""

    driver: str
    host: str
    port: int
    user: str
    password: str
    name: str
    url_override: str | None = None

    @property
    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy compatible URL."""

        if self.url_override:
            return self.url_override
        if self.password:
            credentials = f"{self.user}:{self.password}"
        else:
            credentials = self.user
        return f"{self.driver}://{credentials}@{self.host}:{self.port}/{self.name}"

    @property
    def masked_url(self) -> str:
        if self.url_override:
            return self.url_override.split("@")[-1]
        pwd = "***" if self.password else ""
        return f"{self.driver}://{self.user}:{pwd}@{self.host}:{self.port}/{self.name}"


@dataclass(slots=True)
class Settings:
    """Top-level application configuration container."""

    database: DatabaseSettings
    sqlalchemy_echo: bool = False
    log_level: str = "INFO"
    log_dir: Path | None = Path("logs")
    app_title: str = "Company Z"
    pay_history_limit: int = 5

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        def _get_env(name: str, default: str) -> str:
            return os.getenv(name, default)

        db = DatabaseSettings(
            driver=_get_env("DB_DRIVER", "mysql+pymysql"),
            host=_get_env("DB_HOST", "127.0.0.1"),
            port=int(_get_env("DB_PORT", "3306")),
            user=_get_env("DB_USER", "hr"),
            password=_get_env("DB_PASSWORD", "hr"),
            name=_get_env("DB_NAME", "hr_records"),
            url_override=os.getenv("DATABASE_URL") or None,
        )
        echo_flag = _get_env("SQLALCHEMY_ECHO", "0")
        log_dir = _get_env("LOG_DIR", "logs").strip()
        history_limit = int(_get_env("PAY_HISTORY_LIMIT", "5"))
        if history_limit <= 0:
            raise ValueError("PAY_HISTORY_LIMIT must be a positive integer.")
        return cls(
            database=db,
            sqlalchemy_echo=echo_flag not in {"0", "false", "False"},
            log_level=_get_env("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir) if log_dir else None,
            app_title=_get_env("APP_TITLE", "Company Z"),
            pay_history_limit=history_limit,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()
    # Plain stdlib logger: logging itself is configured from these settings.
    logging.getLogger(__name__).debug(
        "Settings initialised",
        extra={
            "sqlalchemy_echo": settings.sqlalchemy_echo,
            "database": settings.database.masked_url,
            "log_level": settings.log_level,
            "pay_history_limit": settings.pay_history_limit,
        },
    )
    return settings
