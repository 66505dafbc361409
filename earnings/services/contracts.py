"""
Data contracts for shift earnings calculations.

This module defines the read-only snapshots the engine consumes (shifts,
breaks, rate segments, overtime policy) and the value objects it produces.
Snapshots are frozen: the owning layer builds a new snapshot for every
mutation and calls the engine again.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple, Union

from .exceptions import ValidationError

ZERO = Decimal("0")
SECONDS_PER_HOUR = 3600.0


def to_decimal(value: Union[int, float, Decimal, str]) -> Decimal:
    """
    Convert a number to Decimal through its shortest string form.

    Floats go through str() so that 1.25 becomes Decimal("1.25") rather
    than its full binary expansion. The same float always maps to the
    same Decimal, which keeps repeated calculations bitwise identical.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Break:
    """A pause inside a shift. Open while ``end`` is None."""

    start: datetime
    end: Optional[datetime] = None
    is_paid: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_open(self) -> bool:
        return self.end is None


@dataclass(frozen=True)
class RateSegment:
    """
    A stretch of a shift paid at its own hourly rate.

    An open ``end`` runs to the shift end (or to "now" for a running shift).
    Segments may be unsorted, overlapping, or leave gaps.
    """

    start: datetime
    rate_per_hour: Decimal
    end: Optional[datetime] = None
    multiplier: float = 1.0
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Shift:
    """One instance of work. Active while ``end`` is None."""

    start: datetime
    currency_code: str
    end: Optional[datetime] = None
    planned_end: Optional[datetime] = None
    breaks: Tuple[Break, ...] = ()
    rate_segments: Tuple[RateSegment, ...] = ()
    tips_amount: Optional[Decimal] = None
    notes: Optional[str] = None
    tags: Tuple[str, ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_active(self) -> bool:
        return self.end is None

    def __repr__(self):
        return f"Shift(id={self.id}, start={self.start}, end={self.end}, segments={len(self.rate_segments)})"


@dataclass(frozen=True)
class OvertimePolicy:
    """
    Overtime thresholds and multipliers.

    A missing daily threshold means unlimited regular hours. The weekly
    fields are carried for callers that aggregate weeks; the per-shift
    engine does not read them.
    """

    daily_threshold_hours: Optional[float] = 8.0
    daily_multiplier: float = 1.25
    weekly_threshold_hours: Optional[float] = None
    weekly_multiplier: float = 1.5


@dataclass(frozen=True)
class ConcreteBlock:
    """A rate segment resolved against an evaluation boundary."""

    start: datetime
    end: datetime
    rate_per_hour: Decimal
    multiplier: float

    @property
    def duration_hours(self) -> float:
        return (self.end - self.start).total_seconds() / SECONDS_PER_HOUR


@dataclass(frozen=True)
class OvertimeAllocation:
    """Money and hours split into regular and overtime portions."""

    base_earnings: Decimal = ZERO
    overtime_earnings: Decimal = ZERO
    regular_hours: float = 0.0
    overtime_hours: float = 0.0


@dataclass(frozen=True)
class EarningsResult:
    """Totals for a finished shift. Produced fresh on every computation."""

    duration_hours: float
    base_earnings: Decimal
    overtime_earnings: Decimal
    total_earnings: Decimal
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    tips_amount: Decimal = ZERO


def validate_shift(shift: Shift) -> Shift:
    """
    Check the data-model invariants of a shift snapshot.

    Args:
        shift: Snapshot to validate

    Returns:
        Shift: The same snapshot, unchanged

    Raises:
        ValidationError: If an invariant is violated
    """
    if shift.end is not None and shift.end < shift.start:
        raise ValidationError(
            f"Shift end {shift.end.isoformat()} is before start {shift.start.isoformat()}"
        )

    for brk in shift.breaks:
        if brk.end is not None and brk.end < brk.start:
            raise ValidationError(
                f"Break end {brk.end.isoformat()} is before start {brk.start.isoformat()}"
            )

    for segment in shift.rate_segments:
        if segment.end is not None and segment.end < segment.start:
            raise ValidationError(
                f"Rate segment end {segment.end.isoformat()} is before start {segment.start.isoformat()}"
            )
        if to_decimal(segment.rate_per_hour) < ZERO:
            raise ValidationError(f"Hourly rate must not be negative: {segment.rate_per_hour}")
        if segment.multiplier <= 0:
            raise ValidationError(f"Rate multiplier must be positive: {segment.multiplier}")

    if shift.tips_amount is not None and to_decimal(shift.tips_amount) < ZERO:
        raise ValidationError(f"Tips amount must not be negative: {shift.tips_amount}")

    return shift
