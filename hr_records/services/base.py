"""Shared plumbing for services that talk to the record store."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from hr_records.core.exceptions import RecordStoreError


@contextmanager
def store_errors(operation: str, logger: logging.Logger) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as ``RecordStoreError``."""

    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Record store failure during %s", operation)
        raise RecordStoreError(f"Could not complete {operation}. Please try again.") from exc
