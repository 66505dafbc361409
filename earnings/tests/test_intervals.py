"""
Tests for break clipping and payable duration.
"""

from unittest.mock import patch

from earnings.services.intervals import (
    duration_hours,
    payable_seconds,
    resolve_boundary,
    unpaid_break_seconds,
)
from earnings.tests.helpers import T0, at, make_shift, paid, unpaid


class TestUnpaidBreakSeconds:
    def test_paid_breaks_contribute_nothing(self):
        shift = make_shift(4, breaks=[paid(1, 2)])
        assert unpaid_break_seconds(shift) == 0.0

    def test_unpaid_break_inside_shift(self):
        shift = make_shift(4, breaks=[unpaid(2, 2.5)])
        assert unpaid_break_seconds(shift) == 1800.0

    def test_open_break_runs_until_boundary(self):
        shift = make_shift(breaks=[unpaid(2)])
        assert unpaid_break_seconds(shift, at(3)) == 3600.0

    def test_break_after_boundary_contributes_nothing(self):
        shift = make_shift(breaks=[unpaid(5, 6)])
        assert unpaid_break_seconds(shift, at(4)) == 0.0

    def test_break_straddling_boundary_is_clipped(self):
        shift = make_shift(breaks=[unpaid(3, 5)])
        assert unpaid_break_seconds(shift, at(4)) == 3600.0

    def test_break_before_shift_start_is_clipped_to_start(self):
        shift = make_shift(4, breaks=[unpaid(-1, 0.5)])
        assert unpaid_break_seconds(shift) == 1800.0

    def test_multiple_unpaid_breaks_are_summed(self):
        shift = make_shift(8, breaks=[unpaid(2, 2.25), unpaid(5, 5.5), paid(6, 7)])
        assert unpaid_break_seconds(shift) == 2700.0


class TestDurationHours:
    def test_unpaid_break_deducted(self):
        shift = make_shift(4, breaks=[unpaid(2, 2.5)])
        assert duration_hours(shift) == 3.5

    def test_paid_break_not_deducted(self):
        shift = make_shift(4, breaks=[paid(2, 2.5)])
        assert duration_hours(shift) == 4.0

    def test_boundary_before_start_is_zero(self):
        shift = make_shift(4)
        assert duration_hours(shift, at(-1)) == 0.0

    def test_boundary_at_start_is_zero(self):
        assert duration_hours(make_shift(), T0) == 0.0

    def test_explicit_boundary_overrides_end(self):
        shift = make_shift(4)
        assert duration_hours(shift, at(2)) == 2.0

    def test_active_shift_with_open_break_stops_accruing(self):
        shift = make_shift(breaks=[unpaid(1)])
        assert duration_hours(shift, at(1)) == 1.0
        assert duration_hours(shift, at(3)) == 1.0

    def test_payable_seconds_is_unclamped(self):
        shift = make_shift()
        assert payable_seconds(shift, at(-1)) == -3600.0


class TestResolveBoundary:
    def test_explicit_boundary_wins(self):
        assert resolve_boundary(make_shift(4), at(1)) == at(1)

    def test_shift_end_used_when_no_boundary(self):
        assert resolve_boundary(make_shift(4)) == at(4)

    def test_active_shift_falls_back_to_now(self):
        with patch("earnings.services.intervals.timezone.now", return_value=at(2)):
            assert resolve_boundary(make_shift()) == at(2)
            assert duration_hours(make_shift()) == 2.0
