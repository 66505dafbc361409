"""
Time-interval arithmetic for shifts.

Every function takes an evaluation boundary: the instant up to which time is
measured. For a finished shift that is its end; for a running shift it is
"now" or whatever instant the caller is rendering.
"""

from datetime import datetime
from typing import Optional

from django.utils import timezone

from .contracts import SECONDS_PER_HOUR, Shift


def resolve_boundary(shift: Shift, boundary: Optional[datetime] = None) -> datetime:
    """Explicit boundary first, then the shift end, then the current instant."""
    if boundary is not None:
        return boundary
    if shift.end is not None:
        return shift.end
    return timezone.now()


def _overlap_seconds(
    start: datetime, end: datetime, window_start: datetime, window_end: datetime
) -> float:
    lo = max(start, window_start)
    hi = min(end, window_end)
    return max(0.0, (hi - lo).total_seconds())


def unpaid_break_seconds(shift: Shift, boundary: Optional[datetime] = None) -> float:
    """
    Total unpaid break time inside [shift.start, boundary], in seconds.

    Open breaks run until the boundary. Paid breaks and breaks that start
    after the boundary contribute nothing.
    """
    e = resolve_boundary(shift, boundary)
    total = 0.0
    for brk in shift.breaks:
        if brk.is_paid:
            continue
        brk_end = brk.end if brk.end is not None else e
        total += _overlap_seconds(brk.start, brk_end, shift.start, e)
    return total


def duration_hours(shift: Shift, boundary: Optional[datetime] = None) -> float:
    """Payable hours up to the boundary, net of unpaid breaks. Never negative."""
    e = resolve_boundary(shift, boundary)
    gross = (e - shift.start).total_seconds()
    unpaid = unpaid_break_seconds(shift, e)
    return max(0.0, (gross - unpaid) / SECONDS_PER_HOUR)


def payable_seconds(shift: Shift, boundary: Optional[datetime] = None) -> float:
    """Elapsed seconds minus unpaid breaks, unclamped."""
    e = resolve_boundary(shift, boundary)
    return (e - shift.start).total_seconds() - unpaid_break_seconds(shift, e)
