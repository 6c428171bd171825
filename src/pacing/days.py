"""
Day counting and integer rounding used by the progress evaluator.

All helpers work on exact integers so results never depend on float rounding.
"""

from datetime import datetime, timedelta, timezone

ONE_DAY = timedelta(days=1)


def days_between(first: datetime, second: datetime) -> int:
    """
    Number of full 24-hour periods between two aware instants.

    Symmetric: days_between(a, b) == days_between(b, a). Both sides are
    converted to UTC first; subtracting two datetimes that share a tzinfo
    would otherwise use wall-clock time and miscount across DST shifts.
    """
    if first.utcoffset() is None or second.utcoffset() is None:
        raise ValueError("days_between needs timezone-aware datetimes")
    return abs(second.astimezone(timezone.utc) - first.astimezone(timezone.utc)) // ONE_DAY


def ceil_div(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return -(-numerator // denominator)


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, halves going up. Non-negative inputs only."""
    if numerator < 0 or denominator <= 0:
        raise ValueError("round_half_up expects a non-negative fraction")
    return (2 * numerator + denominator) // (2 * denominator)
