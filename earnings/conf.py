"""
Earnings settings read from ``settings.EARNINGS``.

Any key missing from the Django setting falls back to DEFAULTS, so a
project can override just the values it cares about.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.conf import settings

from earnings.services.contracts import OvertimePolicy, to_decimal
from earnings.services.enums import ProgressMode

MIN_LIVE_TICK_SECONDS = 0.1

DEFAULTS = {
    "DEFAULT_HOURLY_RATE": Decimal("125"),
    "CURRENCY_CODE": "ILS",
    "SYMBOL_ON_RIGHT": True,
    "LIVE_TICK_SECONDS": 1.0,
    "DAILY_OVERTIME_THRESHOLD_HOURS": 8.0,
    "DAILY_OVERTIME_MULTIPLIER": 1.25,
    "WEEKLY_OVERTIME_THRESHOLD_HOURS": None,
    "WEEKLY_OVERTIME_MULTIPLIER": 1.5,
    "PROGRESS_MODE": "planned_end",
    "TARGET_HOURS": 8.0,
}


@dataclass(frozen=True)
class EarningsSettings:
    default_hourly_rate: Decimal
    currency_code: str
    symbol_on_right: bool
    live_tick_seconds: float
    progress_mode: ProgressMode
    target_hours: float
    overtime_policy: OvertimePolicy


def _optional_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def get_earnings_settings() -> EarningsSettings:
    """Build settings from ``settings.EARNINGS`` merged over DEFAULTS."""
    raw = dict(DEFAULTS)
    raw.update(getattr(settings, "EARNINGS", {}) or {})

    policy = OvertimePolicy(
        daily_threshold_hours=_optional_float(raw["DAILY_OVERTIME_THRESHOLD_HOURS"]),
        daily_multiplier=float(raw["DAILY_OVERTIME_MULTIPLIER"]),
        weekly_threshold_hours=_optional_float(raw["WEEKLY_OVERTIME_THRESHOLD_HOURS"]),
        weekly_multiplier=float(raw["WEEKLY_OVERTIME_MULTIPLIER"]),
    )

    return EarningsSettings(
        default_hourly_rate=to_decimal(raw["DEFAULT_HOURLY_RATE"]),
        currency_code=str(raw["CURRENCY_CODE"]).upper(),
        symbol_on_right=bool(raw["SYMBOL_ON_RIGHT"]),
        live_tick_seconds=max(MIN_LIVE_TICK_SECONDS, float(raw["LIVE_TICK_SECONDS"])),
        progress_mode=ProgressMode.from_string(raw["PROGRESS_MODE"]),
        target_hours=float(raw["TARGET_HOURS"]),
        overtime_policy=policy,
    )


def get_overtime_policy() -> OvertimePolicy:
    return get_earnings_settings().overtime_policy
