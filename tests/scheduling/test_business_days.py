from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from journeypilot.scheduling.business_days import add_business_days, business_days_between, is_business_day

MONDAY = date(2026, 2, 9)
FRIDAY = date(2026, 2, 13)
SATURDAY = date(2026, 2, 14)

WINDOW = [MONDAY + timedelta(days=offset) for offset in range(14)]


@pytest.mark.parametrize(
    ("start", "days", "expected"),
    [
        (MONDAY, 0, MONDAY),
        (MONDAY, 2, date(2026, 2, 11)),
        (MONDAY, 5, date(2026, 2, 16)),
        (MONDAY, 10, date(2026, 2, 23)),
        (FRIDAY, 1, date(2026, 2, 16)),
        (SATURDAY, 1, date(2026, 2, 16)),
        (SATURDAY, 0, SATURDAY),
    ],
)
def test_add_business_days(start: date, days: int, expected: date) -> None:
    assert add_business_days(start, days) == expected


def test_add_business_days_rejects_negative_counts() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        add_business_days(MONDAY, -1)


def test_add_business_days_keeps_time_of_day() -> None:
    start = datetime(2026, 2, 13, 9, 30)

    result = add_business_days(start, 1)

    assert result == datetime(2026, 2, 16, 9, 30)


def test_add_business_days_does_not_touch_input() -> None:
    start = date(2026, 2, 9)
    add_business_days(start, 3)
    assert start == date(2026, 2, 9)


@pytest.mark.parametrize("start", WINDOW)
def test_add_business_days_never_lands_on_weekend(start: date) -> None:
    previous = start
    for n in range(1, 16):
        result = add_business_days(start, n)
        assert is_business_day(result)
        assert result > previous
        previous = result


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (MONDAY, date(2026, 2, 11), 2),
        (MONDAY, date(2026, 2, 23), 10),
        (FRIDAY, date(2026, 2, 16), 1),
        (SATURDAY, date(2026, 2, 15), 0),
        (MONDAY, MONDAY, 0),
        (date(2026, 2, 11), MONDAY, 0),
    ],
)
def test_business_days_between(start: date, end: date, expected: int) -> None:
    assert business_days_between(start, end) == expected


@pytest.mark.parametrize("start", [day for day in WINDOW if is_business_day(day)])
def test_business_days_between_inverts_add_business_days(start: date) -> None:
    for n in range(0, 16):
        assert business_days_between(start, add_business_days(start, n)) == n


def test_business_days_between_is_additive() -> None:
    a, b, c = MONDAY, date(2026, 2, 18), date(2026, 3, 2)
    assert business_days_between(a, c) == business_days_between(a, b) + business_days_between(b, c)
