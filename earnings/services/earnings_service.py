"""
Main earnings orchestrator service.

This module provides the EarningsService class, the interface the
presentation and export layers call. It resolves the overtime policy from
settings, delegates to the pure calculators and logs every calculation.
"""

import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, Optional

from django.utils import timezone

from core.logging_utils import err_tag, hash_id

from .contracts import EarningsResult, OvertimePolicy, Shift
from .enums import CalculationMode
from .exceptions import EarningsError
from .totalizer import compute_final, compute_live

logger = logging.getLogger(__name__)


class EarningsService:
    """
    Orchestrator for shift earnings calculations.

    Calculations never fall back to partial results: errors are logged
    and re-raised to the caller.
    """

    def __init__(self, policy: Optional[OvertimePolicy] = None):
        """
        Initialize the service.

        Args:
            policy: Overtime policy to apply; read from settings when omitted
        """
        if policy is None:
            from earnings.conf import get_overtime_policy

            policy = get_overtime_policy()
        self.policy = policy

    def calculate_final(self, shift: Shift) -> EarningsResult:
        """
        Calculate totals for a finished shift.

        Raises:
            MissingEndTimeError: If the shift has not been clocked out
        """
        start_time = time.time()
        try:
            result = compute_final(shift, self.policy)
        except EarningsError as e:
            self._log_error(shift, CalculationMode.FINAL, e, start_time)
            raise

        logger.info(
            "Final earnings calculated",
            extra={
                "shift": hash_id(shift.id),
                "mode": CalculationMode.FINAL.value,
                "duration_hours": result.duration_hours,
                "overtime_hours": result.overtime_hours,
                "total_earnings": str(result.total_earnings),
                "duration_ms": (time.time() - start_time) * 1000,
                "action": "earnings_final_success",
            },
        )
        return result

    def calculate_live(self, shift: Shift, as_of: Optional[datetime] = None) -> Decimal:
        """
        Straight-accrual earnings of a running shift.

        Args:
            shift: Shift snapshot, normally still active
            as_of: Evaluation instant; defaults to now

        Returns:
            Decimal: Earnings accrued so far, without overtime
        """
        as_of = as_of or timezone.now()
        amount = compute_live(shift, as_of)
        logger.debug(
            "Live earnings tick",
            extra={
                "shift": hash_id(shift.id),
                "mode": CalculationMode.LIVE.value,
                "amount": str(amount),
                "action": "earnings_live_tick",
            },
        )
        return amount

    def calculate_many(self, shifts: Iterable[Shift]) -> Dict[object, EarningsResult]:
        """
        Calculate final totals for every finished shift.

        Active shifts are skipped and counted in the summary log.

        Returns:
            Dict[object, EarningsResult]: Results keyed by shift id
        """
        start_time = time.time()
        results = {}
        skipped = 0

        for shift in shifts:
            if shift.is_active:
                skipped += 1
                continue
            results[shift.id] = compute_final(shift, self.policy)

        logger.info(
            f"Calculated earnings for {len(results)} shifts",
            extra={
                "calculated": len(results),
                "skipped_active": skipped,
                "duration_ms": (time.time() - start_time) * 1000,
                "action": "earnings_bulk_success",
            },
        )
        return results

    def _log_error(
        self,
        shift: Shift,
        mode: CalculationMode,
        error: Exception,
        start_time: float,
    ) -> None:
        logger.error(
            f"Earnings calculation failed in {mode.value} mode",
            extra={
                "shift": hash_id(shift.id),
                "mode": mode.value,
                "err": err_tag(error),
                "error_type": type(error).__name__,
                "duration_ms": (time.time() - start_time) * 1000,
                "action": "earnings_calculation_error",
            },
        )
