"""
Domain time utilities (pure).

Centralized timestamp validation and calendar helpers.

Behavior and error messages must remain consistent across the domain model.
Weekdays follow ISO numbering: Monday = 1 ... Sunday = 7.
"""

from __future__ import annotations

from datetime import datetime, timedelta

# Earliest date accepted for a sale at entry time.
EARLIEST_SALE_DATE: datetime = datetime(2000, 1, 1)


def require_datetime(name: str, value: object) -> None:
    """Enforces that a timestamp field holds a datetime (not a date or string)."""

    if not isinstance(value, datetime):
        raise ValueError(f"{name} must be a datetime, got {type(value).__name__}")


def align_to(value: datetime, reference: datetime) -> datetime:
    """
    Express `value` in the calendar of `reference`.

    - aware value, aware reference: converted to the reference's zone
    - aware value, naive reference: converted to local system time, made naive
    - naive value, aware reference: read as wall-clock time in the reference's zone
    - both naive: unchanged
    """

    value_aware = value.tzinfo is not None and value.utcoffset() is not None
    reference_aware = reference.tzinfo is not None and reference.utcoffset() is not None

    if value_aware and reference_aware:
        return value.astimezone(reference.tzinfo)
    if value_aware:
        return value.astimezone().replace(tzinfo=None)
    if reference_aware:
        return value.replace(tzinfo=reference.tzinfo)
    return value


def start_of_day(value: datetime) -> datetime:
    """Midnight of the calendar day containing `value` (tzinfo preserved)."""

    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Midnight of the Monday of the week containing `now`."""

    return start_of_day(now) - timedelta(days=now.isoweekday() - 1)


def same_calendar_day(value: datetime, reference: datetime) -> bool:
    """True when `value` falls on the same (year, month, day) as `reference`."""

    local = align_to(value, reference)
    return (local.year, local.month, local.day) == (reference.year, reference.month, reference.day)


def earliest_sale_date(reference: datetime) -> datetime:
    """EARLIEST_SALE_DATE expressed with the same awareness as `reference`."""

    return align_to(EARLIEST_SALE_DATE, reference)
