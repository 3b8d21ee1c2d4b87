"""
Tests for `services/aggregation.py`.

Covers rules:
- today_sales keeps exactly the sales on the reference calendar day, in input order.
- this_week_sales keeps sales from Monday 00:00 up to (not including) the next Monday.
- Weekday groupings read dates in the same calendar as the filters.
- Sums are exact Decimals and empty input yields zero / empty mappings.
- Product colors do not depend on input order.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from itertools import permutations

import pytest

from services.aggregation import (
    DEFAULT_PALETTE,
    assign_product_colors,
    group_by_product,
    group_by_weekday,
    sum_amounts,
    this_week_sales,
    today_sales,
    today_summary,
    week_summary,
    weekday_series,
)

PLUS_TEN = timezone(timedelta(hours=10))


@pytest.fixture
def scenario(make_sale, now):
    """Two sales today and one eight days ago."""
    return [
        make_sale("Bob", "Widget", "10.00", now.replace(hour=9)),
        make_sale("Ann", "Gadget", "5.00", now.replace(hour=11)),
        make_sale("Sam", "Widget", "3.00", now - timedelta(days=8)),
    ]


def test_today_summary_scenario(scenario, now) -> None:
    """Verify today's total and product breakdown ignore older sales."""

    summary = today_summary(scenario, now)

    assert summary.total == Decimal("15.00")
    assert summary.by_product == {"Widget": Decimal("10.00"), "Gadget": Decimal("5.00")}
    assert summary.count == 2


def test_today_sales_matches_calendar_day_and_keeps_order(make_sale, now) -> None:
    """Verify only sales on the reference day are kept, in input order."""

    sales = [
        make_sale("A", "P", "1", now.replace(hour=23, minute=59)),
        make_sale("B", "P", "2", now.replace(hour=0, minute=0) - timedelta(seconds=1)),
        make_sale("C", "P", "3", now.replace(hour=0, minute=0)),
        make_sale("D", "P", "4", now.replace(year=2024)),
    ]

    todays = today_sales(sales, now)

    assert [sale.customer_name for sale in todays] == ["A", "C"]
    assert sum_amounts(todays) == Decimal("1") + Decimal("3")


def test_filters_do_not_mutate_input(scenario, now) -> None:
    """Verify the day and week filters leave their input untouched."""

    snapshot = list(scenario)

    today_sales(scenario, now)
    this_week_sales(scenario, now)

    assert scenario == snapshot


def test_this_week_starts_monday_midnight(make_sale, now) -> None:
    """Verify the week window opens at Monday 00:00 inclusive."""

    monday = datetime(2025, 1, 6)
    sales = [
        make_sale("Sun", "P", "1", monday - timedelta(microseconds=1)),
        make_sale("Mon", "P", "2", monday),
        make_sale("Wed", "P", "4", now),
        make_sale("Old", "P", "8", monday - timedelta(days=8)),
    ]

    weeks = this_week_sales(sales, now)

    assert [sale.customer_name for sale in weeks] == ["Mon", "Wed"]
    assert all(sale.date >= monday for sale in weeks)


def test_this_week_ends_before_next_monday(make_sale, now) -> None:
    """Verify sales from the following week are left out of a past week."""

    sales = [
        make_sale("Tue", "P", "1", datetime(2025, 1, 7, 9, 0)),
        make_sale("Sun", "P", "10", datetime(2025, 1, 12, 23, 59, 59)),
        make_sale("NextMon", "P", "50", datetime(2025, 1, 13, 0, 0)),
        make_sale("NextTue", "P", "100", datetime(2025, 1, 14, 9, 0)),
    ]

    weeks = this_week_sales(sales, now)

    assert [sale.customer_name for sale in weeks] == ["Tue", "Sun"]

    summary = week_summary(sales, now)
    assert summary.total == Decimal("11")
    assert summary.by_weekday == {2: Decimal("1"), 7: Decimal("10")}


def test_this_week_on_monday_morning_only_includes_today(make_sale) -> None:
    """Verify Sunday's sales belong to the previous week."""

    now = datetime(2025, 1, 6, 8, 0)
    sales = [
        make_sale("A", "P", "1", datetime(2025, 1, 5, 22, 0)),
        make_sale("B", "P", "2", datetime(2025, 1, 6, 7, 0)),
    ]

    assert [sale.customer_name for sale in this_week_sales(sales, now)] == ["B"]


def test_empty_input_degrades_to_zero(now) -> None:
    """Verify every aggregation returns zero or empty for no sales."""

    assert sum_amounts([]) == Decimal("0")
    assert group_by_product([]) == {}
    assert group_by_weekday([]) == {}
    assert today_sales([], now) == []
    assert this_week_sales([], now) == []

    summary = week_summary([], now)
    assert summary.total == 0
    assert summary.count == 0
    assert summary.series() == [(day, Decimal("0")) for day in range(1, 8)]


def test_sum_amounts_is_exact_over_many_small_sales(make_sale, now) -> None:
    """Verify a thousand 0.10 sales add up to exactly 100."""

    sales = [make_sale("A", "P", "0.10", now) for _ in range(1000)]

    assert sum_amounts(sales) == Decimal("100.00")


def test_group_by_weekday(make_sale) -> None:
    """Verify per-weekday sums and the zero-filled Monday..Sunday series."""

    sales = [
        make_sale("A", "P", "2.50", datetime(2025, 1, 6, 9)),   # Monday
        make_sale("B", "P", "1.50", datetime(2025, 1, 6, 18)),  # Monday
        make_sale("C", "P", "4.00", datetime(2025, 1, 8, 12)),  # Wednesday
        make_sale("D", "P", "-1.00", datetime(2025, 1, 12, 9)),  # Sunday refund
    ]

    assert group_by_weekday(sales) == {1: Decimal("4.00"), 3: Decimal("4.00"), 7: Decimal("-1.00")}
    assert weekday_series(sales) == [
        (1, Decimal("4.00")),
        (2, Decimal("0")),
        (3, Decimal("4.00")),
        (4, Decimal("0")),
        (5, Decimal("0")),
        (6, Decimal("0")),
        (7, Decimal("-1.00")),
    ]


def test_week_summary(scenario, now) -> None:
    """Verify the week total, weekday buckets and week start."""

    summary = week_summary(scenario, now)

    assert summary.total == Decimal("15.00")
    assert summary.by_weekday == {3: Decimal("15.00")}
    assert summary.count == 2
    assert summary.week_start == datetime(2025, 1, 6)


def test_aware_sales_are_filtered_in_reference_zone(make_sale) -> None:
    """Verify day membership is decided in the reference instant's zone."""

    plus_two = timezone(timedelta(hours=2))
    now = datetime(2025, 1, 9, 10, 0, tzinfo=plus_two)
    sales = [
        make_sale("Late", "P", "1", datetime(2025, 1, 8, 23, 30, tzinfo=timezone.utc)),
        make_sale("Early", "P", "2", datetime(2025, 1, 8, 21, 30, tzinfo=timezone.utc)),
    ]

    assert [sale.customer_name for sale in today_sales(sales, now)] == ["Late"]


def test_utc_sale_counts_on_the_same_weekday_as_today(make_sale) -> None:
    """Verify a UTC Sunday-evening sale is Monday in a +10:00 week summary."""

    now = datetime(2026, 10, 19, 10, 0, tzinfo=PLUS_TEN)  # Monday
    sales = [make_sale("Bob", "Widget", "5", datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc))]

    assert today_summary(sales, now).total == Decimal("5")

    summary = week_summary(sales, now)
    assert summary.by_weekday == {1: Decimal("5")}
    assert summary.series()[0] == (1, Decimal("5"))


def test_weekday_grouping_uses_reference_calendar(make_sale) -> None:
    """Verify the optional reference instant shifts weekdays into its zone."""

    now = datetime(2026, 10, 21, 12, 0, tzinfo=PLUS_TEN)
    sales = [make_sale("Bob", "Widget", "5", datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc))]

    assert group_by_weekday(sales) == {7: Decimal("5")}
    assert group_by_weekday(sales, now) == {1: Decimal("5")}
    assert weekday_series(sales, now)[0] == (1, Decimal("5"))


def test_product_colors_ignore_input_order() -> None:
    """Verify every ordering of the same products yields the same colors."""

    products = ["Widget", "Gadget", "Bolt"]
    expected = {"Bolt": DEFAULT_PALETTE[0], "Gadget": DEFAULT_PALETTE[1], "Widget": DEFAULT_PALETTE[2]}

    for ordering in permutations(products):
        assert assign_product_colors(ordering) == expected


def test_product_colors_cycle_palette_and_deduplicate() -> None:
    """Verify duplicates collapse and the palette wraps around."""

    colors = assign_product_colors(["c", "a", "b", "a", "d"], palette=("red", "blue"))

    assert colors == {"a": "red", "b": "blue", "c": "red", "d": "blue"}


def test_product_colors_require_a_palette() -> None:
    """Verify an empty palette is rejected."""

    with pytest.raises(ValueError):
        assign_product_colors(["a"], palette=())
