"""Tests for the queue-backed logging setup."""
from __future__ import annotations

import logging
from dataclasses import replace
from logging.handlers import QueueHandler

from hr_records.core.config import Settings
from hr_records.core.log import LoggingConfig
from hr_records.core.logger import get_logger, init_logging, log_context, shutdown_logging, timeit


def _queue_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, QueueHandler)]


def test_config_follows_settings(tmp_path) -> None:
    settings = replace(Settings.from_env(), log_level="debug", log_dir=tmp_path)

    cfg = LoggingConfig.from_settings(settings)

    assert cfg.level == logging.DEBUG
    assert cfg.log_dir == tmp_path


def test_unknown_level_falls_back_to_info() -> None:
    settings = replace(Settings.from_env(), log_level="chatty")

    assert LoggingConfig.from_settings(settings).level == logging.INFO


def test_records_reach_the_daily_file_with_bound_context(tmp_path) -> None:
    settings = replace(Settings.from_env(), log_level="INFO", log_dir=tmp_path)
    init_logging(settings, console=False)
    try:
        with log_context.scope(operation="salary_adjustment"):
            with timeit("Salary adjustment", logger=get_logger("hr_records.tests"), unit="employees") as timer:
                timer.add(3)
        get_logger("hr_records.tests").debug("below the configured level")
    finally:
        shutdown_logging()

    [log_file] = tmp_path.glob("hr_records_*.log")
    text = log_file.read_text(encoding="utf-8")
    assert "operation=salary_adjustment Salary adjustment completed in" in text
    assert "(3 employees" in text
    assert "below the configured level" not in text


def test_init_is_idempotent_and_shutdown_detaches() -> None:
    settings = replace(Settings.from_env(), log_dir=None)

    first = init_logging(settings, console=False)
    second = init_logging(settings, console=False)
    assert first == second
    assert len(_queue_handlers()) == 1

    shutdown_logging()

    assert _queue_handlers() == []
