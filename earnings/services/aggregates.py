"""
Aggregations over many shifts: all-time totals, monthly history and the
numeric rows behind report exports.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from django.utils import timezone

from .contracts import ZERO, OvertimePolicy, Shift
from .intervals import duration_hours, resolve_boundary
from .totalizer import compute_final

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftRow:
    """Numeric values of one report line."""

    shift_id: object
    start: datetime
    end: datetime
    duration_hours: float
    total_earnings: Decimal
    currency_code: str
    is_active: bool = False


def total_earnings(shifts: Iterable[Shift], policy: OvertimePolicy) -> Decimal:
    """Sum of final totals over finished shifts. Active shifts are ignored."""
    total = ZERO
    for shift in shifts:
        if shift.is_active:
            continue
        total += compute_final(shift, policy).total_earnings
    return total


def totals_by_month(
    shifts: Iterable[Shift], policy: OvertimePolicy
) -> Dict[Tuple[int, int], Decimal]:
    """
    Final totals grouped by the local (year, month) of the shift start.

    Months are ordered most recent first. A month that only holds active
    shifts is still listed, with a zero total.
    """
    grouped: Dict[Tuple[int, int], Decimal] = {}
    for shift in shifts:
        local_start = timezone.localtime(shift.start)
        key = (local_start.year, local_start.month)
        amount = ZERO if shift.is_active else compute_final(shift, policy).total_earnings
        grouped[key] = grouped.get(key, ZERO) + amount

    return dict(sorted(grouped.items(), key=lambda item: item[0], reverse=True))


def export_rows(
    shifts: Iterable[Shift],
    policy: OvertimePolicy,
    as_of: Optional[datetime] = None,
) -> List[ShiftRow]:
    """
    Build report rows in chronological order.

    Active shifts are measured up to ``as_of`` (the current instant when
    omitted) and report zero earnings until they are clocked out.
    """
    rows = []
    active = 0
    for shift in sorted(shifts, key=lambda s: s.start):
        if shift.is_active:
            active += 1
            end = resolve_boundary(shift, as_of)
            hours = duration_hours(shift, end)
            earnings = ZERO
        else:
            end = shift.end
            result = compute_final(shift, policy)
            hours = result.duration_hours
            earnings = result.total_earnings

        rows.append(
            ShiftRow(
                shift_id=shift.id,
                start=shift.start,
                end=end,
                duration_hours=hours,
                total_earnings=earnings,
                currency_code=shift.currency_code,
                is_active=shift.is_active,
            )
        )

    logger.debug(
        "Export rows built",
        extra={"rows": len(rows), "active_shifts": active, "action": "export_rows_built"},
    )
    return rows
