"""Logging for the HR records app: rich console output plus a daily log file.

Records are handed to a queue on the calling thread and written by a single
listener thread, so request handlers never block on console or file I/O.
Level and log directory come from :class:`~hr_records.core.config.Settings`.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import date, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from threading import RLock

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from hr_records.core.config import Settings, get_settings

from .context import ContextFilter, log_context
from .timing import timeit

__all__ = [
    "LoggingConfig",
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "timeit",
]

APP_LOGGER = "hr_records"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """Resolved logging options; ``log_dir=None`` disables the file handler."""

    level: int = logging.INFO
    log_dir: Path | None = None
    console: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoggingConfig":
        level = logging.getLevelName(str(settings.log_level).upper())
        return cls(
            level=level if isinstance(level, int) else logging.INFO,
            log_dir=settings.log_dir,
        )


class DailyFileHandler(logging.FileHandler):
    """Append to ``<directory>/hr_records_YYYY-MM-DD.log``, starting a new file each day."""

    def __init__(self, directory: Path) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        self.directory = directory
        self._day = date.today()
        super().__init__(self._path_for(self._day), mode="a", encoding="utf-8")

    def _path_for(self, day: date) -> str:
        return os.fspath(self.directory / f"{APP_LOGGER}_{day.isoformat()}.log")

    def emit(self, record: logging.LogRecord) -> None:
        day = datetime.fromtimestamp(record.created).date()
        if day != self._day:
            self._day = day
            self.baseFilename = self._path_for(day)
            previous = self.setStream(self._open())
            if previous is not None:
                previous.close()
        super().emit(record)


_lock = RLock()
_config: LoggingConfig | None = None
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None
_context_filter = ContextFilter()


def _handlers_for(cfg: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if cfg.console:
        console = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format=DATE_FORMAT,
        )
        console.setFormatter(logging.Formatter("%(context)s%(message)s"))
        handlers.append(console)
    if cfg.log_dir is not None:
        file_handler = DailyFileHandler(Path(cfg.log_dir))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)
    for handler in handlers:
        handler.setLevel(cfg.level)
        handler.addFilter(_context_filter)
    return handlers


def _stop_locked() -> None:
    global _config, _listener, _queue_handler
    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
    _config = None
    _listener = None
    _queue_handler = None


def init_logging(settings: Settings | None = None, *, console: bool = True) -> LoggingConfig:
    """Attach the queue handler to the root logger and start the listener.

    Calling again with an unchanged configuration is a no-op; a different one
    replaces the previously installed handlers. Handlers installed by other
    code (pytest's capture handler, for example) are left alone.
    """

    global _config, _listener, _queue_handler
    cfg = replace(LoggingConfig.from_settings(settings or get_settings()), console=console)
    with _lock:
        if _config == cfg:
            return cfg
        _stop_locked()

        if cfg.console:
            install_rich_traceback(show_locals=False)
        queue_handler = QueueHandler(SimpleQueue())
        queue_handler.addFilter(_context_filter)
        root = logging.getLogger()
        root.setLevel(cfg.level)
        root.addHandler(queue_handler)

        listener = QueueListener(
            queue_handler.queue, *_handlers_for(cfg), respect_handler_level=True
        )
        listener.start()
        _config, _listener, _queue_handler = cfg, listener, queue_handler
    return cfg


def shutdown_logging() -> None:
    """Flush queued records and detach everything ``init_logging`` installed."""

    with _lock:
        _stop_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger in the app namespace, configuring logging on first use."""

    with _lock:
        if _config is None:
            init_logging()
    return logging.getLogger(name or APP_LOGGER)
