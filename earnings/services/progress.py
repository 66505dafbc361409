"""
Progress of a running shift against its plan or a daily target.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .contracts import SECONDS_PER_HOUR, Shift
from .enums import ProgressMode
from .intervals import duration_hours, payable_seconds


@dataclass(frozen=True)
class ShiftProgress:
    """
    Elapsed payable hours, and either the hours left until the planned end
    or the hours already worked past it. Both are None without a plan.
    """

    elapsed_hours: float
    remaining_hours: Optional[float] = None
    overtime_hours: Optional[float] = None

    @property
    def is_past_planned_end(self) -> bool:
        return self.overtime_hours is not None


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def progress_value(
    shift: Shift,
    as_of: datetime,
    mode: Optional[ProgressMode] = None,
    target_hours: Optional[float] = None,
) -> float:
    """
    Fraction of the shift completed at ``as_of``, in [0, 1].

    ``mode`` and ``target_hours`` default to the configured earnings
    settings.

    PLANNED_END: payable seconds over the planned span; 0 when the shift
    has no planned end or the planned span is not positive.
    TARGET_HOURS: payable hours over ``target_hours``; 0 for a
    non-positive target.
    """
    if mode is None or target_hours is None:
        from earnings.conf import get_earnings_settings

        conf = get_earnings_settings()
        mode = mode or conf.progress_mode
        target_hours = conf.target_hours if target_hours is None else target_hours

    if mode is ProgressMode.PLANNED_END:
        if shift.planned_end is None:
            return 0.0
        planned = (shift.planned_end - shift.start).total_seconds()
        if planned <= 0:
            return 0.0
        return _clamp_unit(payable_seconds(shift, as_of) / planned)

    if target_hours <= 0:
        return 0.0
    return _clamp_unit(duration_hours(shift, as_of) / target_hours)


def elapsed_remaining(shift: Shift, as_of: datetime) -> ShiftProgress:
    elapsed = duration_hours(shift, as_of)
    if shift.planned_end is None:
        return ShiftProgress(elapsed_hours=elapsed)

    planned_hours = (shift.planned_end - shift.start).total_seconds() / SECONDS_PER_HOUR
    remaining = planned_hours - elapsed
    if remaining >= 0:
        return ShiftProgress(elapsed_hours=elapsed, remaining_hours=remaining)
    # past the planned end
    return ShiftProgress(elapsed_hours=elapsed, overtime_hours=-remaining)
