"""
Test utilities for earnings tests.

Snapshot factories so tests read as "a 10-hour shift with one segment"
rather than a wall of constructor calls.
"""

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from earnings.services.contracts import Break, RateSegment, Shift

T0 = datetime(2025, 3, 3, 9, 0, tzinfo=dt_timezone.utc)
RATE = Decimal("40")


def at(hours: float = 0, minutes: float = 0) -> datetime:
    """Instant relative to T0"""
    return T0 + timedelta(hours=hours, minutes=minutes)


def make_shift(
    hours=None,
    *,
    start=T0,
    breaks=(),
    segments=None,
    rate=RATE,
    multiplier=1.0,
    tips=None,
    planned_end=None,
    currency_code="ILS",
):
    """
    Factory for shift snapshots.

    ``hours`` sets the end relative to ``start`` (None keeps the shift
    active). Without explicit ``segments`` a single open segment at
    ``rate`` is added; pass ``segments=()`` for an unrated shift.
    """
    end = start + timedelta(hours=hours) if hours is not None else None
    if segments is None:
        segments = (RateSegment(start=start, rate_per_hour=rate, multiplier=multiplier),)
    return Shift(
        start=start,
        end=end,
        currency_code=currency_code,
        planned_end=planned_end,
        breaks=tuple(breaks),
        rate_segments=tuple(segments),
        tips_amount=tips,
    )


def unpaid(start_h, end_h=None):
    return Break(start=at(start_h), end=at(end_h) if end_h is not None else None, is_paid=False)


def paid(start_h, end_h=None):
    return Break(start=at(start_h), end=at(end_h) if end_h is not None else None, is_paid=True)


def segment(start_h, end_h=None, rate=RATE, multiplier=1.0):
    return RateSegment(
        start=at(start_h),
        end=at(end_h) if end_h is not None else None,
        rate_per_hour=Decimal(rate),
        multiplier=multiplier,
    )
