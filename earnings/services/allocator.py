"""
Daily overtime allocation across rate blocks.

Blocks are consumed in chronological order against a single budget of
regular hours. Whatever a block needs beyond the remaining budget is paid
at the daily overtime multiplier, stacked multiplicatively on top of the
block's own multiplier.
"""

import logging
import math
from decimal import Decimal
from typing import Iterable

from .contracts import ZERO, ConcreteBlock, OvertimeAllocation, OvertimePolicy, to_decimal

logger = logging.getLogger(__name__)


def allocate_overtime(
    blocks: Iterable[ConcreteBlock], policy: OvertimePolicy
) -> OvertimeAllocation:
    """
    Split block hours into regular and overtime pay.

    Money accumulates in Decimal; hours stay float because each one feeds a
    single multiplication and is never summed into money.

    Args:
        blocks: Normalized blocks, in chronological order
        policy: Overtime thresholds and multipliers

    Returns:
        OvertimeAllocation: Base and overtime earnings with hour totals
    """
    if policy.daily_threshold_hours is None:
        remaining_regular = math.inf
    else:
        remaining_regular = float(policy.daily_threshold_hours)

    overtime_multiplier = to_decimal(policy.daily_multiplier)

    base: Decimal = ZERO
    overtime: Decimal = ZERO
    regular_hours = 0.0
    overtime_hours = 0.0

    for block in blocks:
        hours = block.duration_hours
        rate = to_decimal(block.rate_per_hour)
        multiplier = to_decimal(block.multiplier)

        if remaining_regular > 0:
            regular = min(hours, remaining_regular)
            base += rate * to_decimal(regular) * multiplier
            over = hours - regular
            if over > 0:
                overtime += rate * to_decimal(over) * overtime_multiplier * multiplier
                overtime_hours += over
            regular_hours += regular
            remaining_regular -= regular
        else:
            overtime += rate * to_decimal(hours) * overtime_multiplier * multiplier
            overtime_hours += hours

    logger.debug(
        "blocks allocated: regular=%s overtime=%s base=%s overtime_pay=%s",
        regular_hours,
        overtime_hours,
        base,
        overtime,
    )

    return OvertimeAllocation(
        base_earnings=base,
        overtime_earnings=overtime,
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
    )
