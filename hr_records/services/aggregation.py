"""In-memory group-by reduction over fetched rows."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeVar

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class GroupTotal:
    key: str
    total: Decimal
    count: int


def group_sum_count(
    rows: Iterable[RowT],
    *,
    key: Callable[[RowT], str],
    value: Callable[[RowT], Decimal],
) -> list[GroupTotal]:
    """Group ``rows`` by ``key`` and reduce each group to (sum of ``value``, row count).

    Groups are returned sorted by key.
    """

    totals: dict[str, tuple[Decimal, int]] = {}
    for row in rows:
        group_key = key(row)
        total, count = totals.get(group_key, (Decimal("0"), 0))
        totals[group_key] = (total + value(row), count + 1)
    return [
        GroupTotal(key=group_key, total=total, count=count)
        for group_key, (total, count) in sorted(totals.items())
    ]
