"""
Shift lifecycle operations on immutable snapshots.

Each function returns a NEW snapshot; the caller persists it and feeds it
back to the calculators. Nothing here is called by the calculators.
"""

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.utils import timezone

from core.logging_utils import hash_id

from .contracts import Break, RateSegment, Shift, to_decimal, validate_shift
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def _require_active(shift: Shift, operation: str) -> None:
    if not shift.is_active:
        raise ValidationError(f"Cannot {operation}: shift {shift.id} has already ended")


def _require_not_before_start(shift: Shift, at: datetime, operation: str) -> None:
    if at < shift.start:
        raise ValidationError(
            f"Cannot {operation} at {at.isoformat()}: before shift start {shift.start.isoformat()}"
        )


def clock_in(
    at: Optional[datetime] = None,
    rate: Optional[Decimal] = None,
    currency_code: Optional[str] = None,
    planned_end: Optional[datetime] = None,
    multiplier: float = 1.0,
) -> Shift:
    """
    Open a new shift with one open rate segment.

    Rate and currency default to the configured earnings settings.
    """
    from earnings.conf import get_earnings_settings

    conf = get_earnings_settings()
    at = at or timezone.now()
    rate = to_decimal(rate) if rate is not None else conf.default_hourly_rate

    if planned_end is not None and planned_end < at:
        raise ValidationError("Planned end must not be before the shift start")

    shift = Shift(
        start=at,
        currency_code=currency_code or conf.currency_code,
        planned_end=planned_end,
        rate_segments=(RateSegment(start=at, rate_per_hour=rate, multiplier=multiplier),),
    )
    validate_shift(shift)

    logger.info(
        "Shift clocked in",
        extra={"shift": hash_id(shift.id), "action": "shift_clock_in"},
    )
    return shift


def clock_out(shift: Shift, at: Optional[datetime] = None) -> Shift:
    at = at or timezone.now()
    _require_active(shift, "clock out")
    _require_not_before_start(shift, at, "clock out")

    closed = replace(shift, end=at)
    logger.info(
        "Shift clocked out",
        extra={"shift": hash_id(shift.id), "action": "shift_clock_out"},
    )
    return closed


def start_break(shift: Shift, at: Optional[datetime] = None, paid: bool = False) -> Shift:
    at = at or timezone.now()
    _require_active(shift, "start a break")
    _require_not_before_start(shift, at, "start a break")

    if any(b.is_open for b in shift.breaks):
        raise ValidationError(f"Shift {shift.id} already has an open break")

    return replace(shift, breaks=shift.breaks + (Break(start=at, is_paid=paid),))


def end_break(shift: Shift, at: Optional[datetime] = None) -> Shift:
    """Close the most recently started open break."""
    at = at or timezone.now()
    _require_active(shift, "end a break")

    open_breaks = [b for b in shift.breaks if b.is_open]
    if not open_breaks:
        raise ValidationError(f"Shift {shift.id} has no open break")

    current = max(open_breaks, key=lambda b: b.start)
    if at < current.start:
        raise ValidationError("Break cannot end before it starts")

    breaks = tuple(
        replace(b, end=at) if b.id == current.id else b for b in shift.breaks
    )
    return replace(shift, breaks=breaks)


def adjust_rate(
    shift: Shift,
    rate: Decimal,
    at: Optional[datetime] = None,
    multiplier: float = 1.0,
) -> Shift:
    """
    Switch a running shift to a new rate.

    The chronologically latest segment is closed at ``at`` and a new open
    segment starts there. ``at`` must not precede the latest segment start.
    """
    at = at or timezone.now()
    _require_active(shift, "adjust the rate")
    _require_not_before_start(shift, at, "adjust the rate")

    new_segment = RateSegment(start=at, rate_per_hour=to_decimal(rate), multiplier=multiplier)

    segments = shift.rate_segments
    if segments:
        latest = max(segments, key=lambda s: s.start)
        if at < latest.start:
            raise ValidationError(
                f"Cannot adjust the rate at {at.isoformat()}: before the current rate "
                f"started at {latest.start.isoformat()}"
            )
        if latest.end is None or latest.end > at:
            segments = tuple(
                replace(s, end=at) if s.id == latest.id else s for s in segments
            )

    adjusted = validate_shift(replace(shift, rate_segments=segments + (new_segment,)))
    logger.info(
        "Shift rate adjusted",
        extra={
            "shift": hash_id(shift.id),
            "segments": len(adjusted.rate_segments),
            "action": "shift_rate_adjusted",
        },
    )
    return adjusted
