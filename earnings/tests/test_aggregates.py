"""
Tests for multi-shift totals, monthly history and export rows.
"""

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from earnings.services.aggregates import export_rows, total_earnings, totals_by_month
from earnings.tests.helpers import RATE, T0, make_shift

FEBRUARY = datetime(2025, 2, 10, 8, 0, tzinfo=dt_timezone.utc)
APRIL = datetime(2025, 4, 1, 8, 0, tzinfo=dt_timezone.utc)


class TestTotalEarnings:
    def test_sums_finished_shifts(self, policy):
        shifts = [make_shift(4), make_shift(10, start=FEBRUARY)]
        # 4h straight + 8h regular and 2h at 1.25
        assert total_earnings(shifts, policy) == RATE * 4 + RATE * 8 + RATE * 2 * Decimal("1.25")

    def test_active_shift_ignored(self, policy):
        assert total_earnings([make_shift(4), make_shift(start=APRIL)], policy) == RATE * 4

    def test_empty(self, policy):
        assert total_earnings([], policy) == Decimal("0")

    def test_includes_tips(self, policy):
        assert total_earnings([make_shift(1, tips=Decimal("10"))], policy) == RATE + Decimal("10")


class TestTotalsByMonth:
    def test_grouped_most_recent_first(self, policy):
        shifts = [
            make_shift(2, start=FEBRUARY),
            make_shift(4),
            make_shift(1, start=FEBRUARY + timedelta(days=3)),
        ]
        totals = totals_by_month(shifts, policy)
        assert list(totals) == [(2025, 3), (2025, 2)]
        assert totals[(2025, 3)] == RATE * 4
        assert totals[(2025, 2)] == RATE * 3

    def test_grouped_by_local_month(self, policy, settings):
        settings.TIME_ZONE = "Asia/Jerusalem"
        # 01:30 on 1 April in Jerusalem
        late = datetime(2025, 3, 31, 22, 30, tzinfo=dt_timezone.utc)
        totals = totals_by_month([make_shift(2, start=late)], policy)
        assert list(totals) == [(2025, 4)]

    def test_utc_month_when_time_zone_is_utc(self, policy, settings):
        settings.TIME_ZONE = "UTC"
        late = datetime(2025, 3, 31, 22, 30, tzinfo=dt_timezone.utc)
        assert list(totals_by_month([make_shift(2, start=late)], policy)) == [(2025, 3)]

    def test_active_only_month_listed_with_zero(self, policy):
        totals = totals_by_month([make_shift(4), make_shift(start=APRIL)], policy)
        assert list(totals) == [(2025, 4), (2025, 3)]
        assert totals[(2025, 4)] == Decimal("0")


class TestExportRows:
    def test_rows_in_chronological_order(self, policy):
        later = make_shift(10)
        earlier = make_shift(2, start=FEBRUARY, currency_code="USD")
        rows = export_rows([later, earlier], policy)

        assert [row.shift_id for row in rows] == [earlier.id, later.id]
        assert rows[0].currency_code == "USD"
        assert rows[0].duration_hours == 2.0
        assert rows[0].total_earnings == RATE * 2
        assert rows[1].end == later.end
        assert rows[1].total_earnings == RATE * 8 + RATE * 2 * Decimal("1.25")
        assert not rows[1].is_active

    def test_active_shift_measured_to_as_of(self, policy):
        active = make_shift(start=APRIL)
        as_of = APRIL + timedelta(hours=3)
        [row] = export_rows([active], policy, as_of=as_of)

        assert row.is_active
        assert row.end == as_of
        assert row.duration_hours == 3.0
        assert row.total_earnings == Decimal("0")

    def test_finished_shift_unaffected_by_as_of(self, policy):
        shift = make_shift(4)
        [row] = export_rows([shift], policy, as_of=T0 + timedelta(hours=1))
        assert row.end == shift.end
        assert row.duration_hours == 4.0
