"""
Enumerations for the earnings calculation system.
"""

from enum import Enum


class CalculationMode(Enum):
    """Which computation produced a figure"""

    FINAL = "final"
    """Finished shift, daily overtime applied"""

    LIVE = "live"
    """Running shift, straight accrual without overtime"""

    def __str__(self):
        return self.value


class ProgressMode(Enum):
    """
    How shift progress is measured.

    PLANNED_END compares payable time with the shift's planned end;
    TARGET_HOURS compares payable hours with a configured daily target.
    """

    PLANNED_END = "planned_end"
    TARGET_HOURS = "target_hours"

    @classmethod
    def get_default(cls) -> "ProgressMode":
        return cls.PLANNED_END

    @classmethod
    def from_string(cls, value: str) -> "ProgressMode":
        """
        Parse a mode name (case-insensitive).

        Unknown or empty values fall back to the default mode.
        """
        if not value:
            return cls.get_default()
        try:
            return cls(value.lower())
        except ValueError:
            return cls.get_default()

    def __str__(self):
        return self.value
