"""
Sales aggregation.

Pure functions over a snapshot of Sale records: filtering by calendar day or
week and summing amounts overall, per product and per weekday.

Nothing here performs I/O or mutates its input; every function degrades to
an empty/zero result on empty input. Input order is preserved by filters.
Amounts are summed as Decimal so many small sales do not drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from domain.sale import Sale
from domain.time import align_to, same_calendar_day, start_of_week

WEEKDAYS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)

# Legend colors for product charts (hex RGB).
DEFAULT_PALETTE: Tuple[str, ...] = (
    "#2196F3",  # blue
    "#F44336",  # red
    "#4CAF50",  # green
    "#FF9800",  # orange
    "#9C27B0",  # purple
    "#00BCD4",  # cyan
    "#FFEB3B",  # yellow
    "#795548",  # brown
)


@dataclass(frozen=True, slots=True)
class TodaySummary:
    """Totals for the calendar day of the reference instant."""
    total: Decimal
    by_product: Dict[str, Decimal]
    count: int


@dataclass(frozen=True, slots=True)
class WeekSummary:
    """
    Totals for the week containing the reference instant.

    week_start is Monday 00:00 of that week; by_weekday only holds weekdays
    that have sales (see `weekday_series` for a gap-free series).
    """
    total: Decimal
    by_weekday: Dict[int, Decimal]
    count: int
    week_start: datetime

    def series(self) -> List[Tuple[int, Decimal]]:
        """Monday..Sunday totals with zero for days without sales."""
        return _zero_filled(self.by_weekday)


def _zero_filled(totals: Dict[int, Decimal]) -> List[Tuple[int, Decimal]]:
    return [(day, totals.get(day, Decimal("0"))) for day in WEEKDAYS]


def today_sales(sales: Iterable[Sale], now: datetime) -> List[Sale]:
    """Sales whose date falls on the same calendar day as `now`."""

    return [sale for sale in sales if same_calendar_day(sale.date, now)]


def this_week_sales(sales: Iterable[Sale], now: datetime) -> List[Sale]:
    """
    Sales dated within the week containing `now`.

    The window is the 7 calendar days Monday..Sunday: from Monday 00:00
    inclusive to the following Monday 00:00 exclusive.
    """

    week_start = start_of_week(now)
    week_end = week_start + timedelta(days=7)
    return [sale for sale in sales if week_start <= align_to(sale.date, now) < week_end]


def sum_amounts(sales: Iterable[Sale]) -> Decimal:
    """Exact sum of amounts; Decimal("0") for no sales."""

    total = Decimal("0")
    for sale in sales:
        total += sale.amount
    return total


def group_by_product(sales: Iterable[Sale]) -> Dict[str, Decimal]:
    """Summed amount per product name. Iteration order is not meaningful."""

    totals: Dict[str, Decimal] = {}
    for sale in sales:
        totals[sale.product] = totals.get(sale.product, Decimal("0")) + sale.amount
    return totals


def group_by_weekday(sales: Iterable[Sale], now: Optional[datetime] = None) -> Dict[int, Decimal]:
    """
    Summed amount per ISO weekday (1 = Monday ... 7 = Sunday).

    With `now`, each date is read in the calendar of `now` (as the day and
    week filters do); without it, the date is read as stored.
    """

    totals: Dict[int, Decimal] = {}
    for sale in sales:
        day = align_to(sale.date, now).isoweekday() if now is not None else sale.weekday
        totals[day] = totals.get(day, Decimal("0")) + sale.amount
    return totals


def weekday_series(sales: Iterable[Sale], now: Optional[datetime] = None) -> List[Tuple[int, Decimal]]:
    """Monday..Sunday (weekday, total) pairs, zero-filled, for bar charts."""

    return _zero_filled(group_by_weekday(sales, now))


def assign_product_colors(
    products: Iterable[str],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Dict[str, str]:
    """
    Map each distinct product to a palette color.

    Products are sorted lexicographically before indexing into the palette
    (cycling when there are more products than colors), so the result does
    not depend on the order products were seen in.
    """

    if not palette:
        raise ValueError("palette must contain at least one color")

    return {
        product: palette[index % len(palette)]
        for index, product in enumerate(sorted(set(products)))
    }


def today_summary(sales: Iterable[Sale], now: datetime) -> TodaySummary:
    """
    Summarize the calendar day of `now`.

    Example:
        summary = today_summary(repository.list_all(), datetime.now())
        print(f"Today: {summary.total} across {summary.count} sales")
    """

    todays = today_sales(sales, now)
    return TodaySummary(
        total=sum_amounts(todays),
        by_product=group_by_product(todays),
        count=len(todays),
    )


def week_summary(sales: Iterable[Sale], now: datetime) -> WeekSummary:
    """Summarize the week (Monday..Sunday) containing `now`."""

    weeks = this_week_sales(sales, now)
    return WeekSummary(
        total=sum_amounts(weeks),
        by_weekday=group_by_weekday(weeks, now),
        count=len(weeks),
        week_start=start_of_week(now),
    )


__all__ = [
    "DEFAULT_PALETTE",
    "TodaySummary",
    "WeekSummary",
    "assign_product_colors",
    "group_by_product",
    "group_by_weekday",
    "sum_amounts",
    "this_week_sales",
    "today_sales",
    "today_summary",
    "week_summary",
    "weekday_series",
]
