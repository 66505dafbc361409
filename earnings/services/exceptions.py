"""
Exceptions raised by the earnings services.
"""


class EarningsError(Exception):
    """Base class for earnings calculation errors"""

    pass


class MissingEndTimeError(EarningsError):
    """Raised when a finished-shift calculation is requested for an active shift"""

    def __init__(self, shift_id=None):
        self.shift_id = shift_id
        super().__init__(
            "Shift has no end time; clock out before computing final earnings"
        )


class ValidationError(EarningsError):
    """Raised when a shift snapshot violates its data-model invariants"""

    pass
