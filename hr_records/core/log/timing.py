"""Duration and throughput logging for store operations."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    unit: str
    count: int = 0
    start: float = field(default_factory=perf_counter)

    def add(self, amount: int = 1) -> None:
        self.count += amount

    @property
    def elapsed(self) -> float:
        return perf_counter() - self.start

    def summary(self) -> str:
        elapsed = self.elapsed
        text = f"{self.label} completed in {elapsed:.2f}s ({self.count:,} {self.unit}"
        if elapsed > 0 and self.count:
            text += f" @ {self.count / elapsed:,.0f} {self.unit}/s"
        return text + ")"


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "items",
) -> Iterator[_Timer]:
    """Log how long the block took and how many ``unit`` it handled.

    Call ``timer.add(n)`` inside the block to count processed items. A block
    that raises is logged at ERROR and the exception propagates.
    """

    log = logger or logging.getLogger("hr_records.timer")
    timer = _Timer(label=label, unit=unit)
    try:
        yield timer
    except Exception:
        log.error("%s failed after %.2fs (%d %s)", label, timer.elapsed, timer.count, unit)
        raise
    log.log(level, timer.summary())
