"""Request/operation fields appended to every log line."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_fields: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "log_context", default={}
)


class LogContext:
    """Bind ``key=value`` pairs to log records emitted inside a ``with`` block."""

    @contextmanager
    def scope(self, **values: object) -> Iterator[None]:
        token = _fields.set(
            {**_fields.get(), **{k: v for k, v in values.items() if v is not None}}
        )
        try:
            yield
        finally:
            _fields.reset(token)


class ContextFilter(logging.Filter):
    """Render the bound fields into ``record.context`` (empty when nothing is bound)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            fields = _fields.get()
            record.context = "".join(f"{k}={v} " for k, v in fields.items())
        return True


log_context = LogContext()
