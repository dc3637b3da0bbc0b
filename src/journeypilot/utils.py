"""Small numeric helpers shared by the scheduler and the scorer."""

from __future__ import annotations


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves toward +infinity.

    Works on exact integers so that e.g. ``round_half_up(5, 2) == 3`` and
    ``round_half_up(-5, 2) == -2``. *denominator* must be positive.
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    return (2 * numerator + denominator) // (2 * denominator)


def percent_of(part: int, whole: int) -> int:
    """``round(100 * part / whole)`` with half-up rounding."""
    return round_half_up(100 * part, whole)


def ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)
