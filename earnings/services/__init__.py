# Earnings services package

from .contracts import (
    Break,
    ConcreteBlock,
    EarningsResult,
    OvertimePolicy,
    RateSegment,
    Shift,
)
from .earnings_service import EarningsService
from .exceptions import EarningsError, MissingEndTimeError, ValidationError
from .intervals import duration_hours, unpaid_break_seconds
from .totalizer import compute_final, compute_live

__all__ = [
    "Break",
    "ConcreteBlock",
    "EarningsError",
    "EarningsResult",
    "EarningsService",
    "MissingEndTimeError",
    "OvertimePolicy",
    "RateSegment",
    "Shift",
    "ValidationError",
    "compute_final",
    "compute_live",
    "duration_hours",
    "unpaid_break_seconds",
]
