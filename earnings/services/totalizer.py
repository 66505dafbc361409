"""
Earnings totals for finished and running shifts.

Two entry points with deliberately different rules:

- ``compute_final`` applies daily overtime and adds tips. It only runs on
  a shift that has an end time.
- ``compute_live`` is the on-screen ticker for a running shift. It sums
  straight accrual (rate x hours x multiplier) per block and applies NO
  overtime split. Only the finalized figure carries overtime; the two must
  not be unified.
"""

import logging
from datetime import datetime
from decimal import Decimal

from core.logging_utils import hash_id

from .allocator import allocate_overtime
from .contracts import ZERO, EarningsResult, OvertimePolicy, Shift, to_decimal
from .exceptions import MissingEndTimeError
from .intervals import duration_hours, payable_seconds
from .normalizer import normalize_blocks

logger = logging.getLogger(__name__)


def compute_final(shift: Shift, policy: OvertimePolicy) -> EarningsResult:
    """
    Compute totals for a finished shift.

    Args:
        shift: Snapshot with an end time
        policy: Overtime policy to apply

    Returns:
        EarningsResult: Duration, base, overtime and grand total

    Raises:
        MissingEndTimeError: If the shift is still active
    """
    if shift.end is None:
        logger.warning(
            "Final earnings requested for an active shift",
            extra={"shift": hash_id(shift.id), "action": "final_missing_end"},
        )
        raise MissingEndTimeError(shift.id)

    end = shift.end
    total_hours = duration_hours(shift, end)
    blocks = normalize_blocks(shift, end)
    allocation = allocate_overtime(blocks, policy)

    tips = to_decimal(shift.tips_amount) if shift.tips_amount is not None else ZERO
    total = allocation.base_earnings + allocation.overtime_earnings + tips

    return EarningsResult(
        duration_hours=total_hours,
        base_earnings=allocation.base_earnings,
        overtime_earnings=allocation.overtime_earnings,
        total_earnings=total,
        regular_hours=allocation.regular_hours,
        overtime_hours=allocation.overtime_hours,
        tips_amount=tips,
    )


def compute_live(shift: Shift, as_of: datetime) -> Decimal:
    """
    Straight-accrual earnings of a shift as of ``as_of``.

    Returns exactly zero while no payable time has elapsed. For a shift
    that already ended, ``as_of`` is clamped to its end.
    """
    if shift.end is not None and as_of > shift.end:
        as_of = shift.end

    if payable_seconds(shift, as_of) <= 0:
        return ZERO

    total = ZERO
    for block in normalize_blocks(shift, as_of):
        hours = max(0.0, block.duration_hours)
        total += (
            to_decimal(block.rate_per_hour)
            * to_decimal(hours)
            * to_decimal(block.multiplier)
        )
    return total
