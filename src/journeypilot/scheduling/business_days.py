"""Business-day arithmetic (Monday to Friday, no holiday calendar).

Both helpers work on :class:`datetime.date` values (``datetime`` instances are
accepted and keep their time of day). Dates are immutable, so callers can
safely reuse the arguments they pass in.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TypeVar

_ONE_DAY = timedelta(days=1)
_SATURDAY = 5

DateT = TypeVar("DateT", bound=date)


def is_business_day(day: date) -> bool:
    return day.weekday() < _SATURDAY


def add_business_days(start: DateT, business_days: int) -> DateT:
    """Return the date *business_days* business days after *start*.

    Weekends are skipped. ``business_days == 0`` returns a date equal to *start*.

    Raises:
        ValueError: *business_days* is negative.
    """
    if business_days < 0:
        raise ValueError(f"business_days must be non-negative, got {business_days}")

    result = start
    added = 0
    while added < business_days:
        result = result + _ONE_DAY
        if is_business_day(result):
            added += 1
    return result


def business_days_between(start: date, end: date) -> int:
    """Count the business days stepped over when walking from *start* to *end*.

    *start* is excluded and *end* is included, so this is the inverse of
    :func:`add_business_days`. Returns 0 when *end* is not after *start*.
    """
    count = 0
    current = start
    while current < end:
        current = current + _ONE_DAY
        if is_business_day(current):
            count += 1
    return count
