"""
tests/instant/test_instant.py

Covers:
  - Construction from components and from the clock
  - Getters, including real-valued seconds
  - Single-field setters: overwrite one field, normalize the rest
  - Setter idempotence
  - with_weekday crossing month boundaries
  - Equality/ordering by offset only, immutability
"""

import dataclasses
from datetime import datetime, timezone

import pytest

from datekit.calendar import DateComponents, Field, GregorianCalendar
from datekit.instant import Instant
from datekit.relative import Ordinal, OrdinalAccessor


NOW = 1_706_696_130.5   # Wed 2024-01-31 10:15:30.5 UTC


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def cal():
    return GregorianCalendar(tz=timezone.utc, clock=lambda: NOW)


@pytest.fixture
def d(cal):
    """Wednesday 31 January 2024, 10:15:30.5 UTC."""
    return Instant.compose(2024, 1, 31, 10, 15, 30.5, calendar=cal)


# ── Helpers ───────────────────────────────────────────────────────────────────

def ts(*args):
    return datetime(*args, tzinfo=timezone.utc).timestamp()


def fields(instant):
    return (instant.year, instant.month, instant.day,
            instant.hours, instant.minutes, instant.seconds)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_compose_offset(self, d):
        assert d.offset == pytest.approx(NOW)

    def test_compose_round_trip(self, d):
        assert fields(d) == (2024, 1, 31, 10, 15, pytest.approx(30.5))

    def test_compose_defaults_to_midnight(self, cal):
        assert Instant.compose(2024, 3, 10, calendar=cal).offset == ts(2024, 3, 10)

    def test_compose_normalizes_out_of_range(self, cal):
        assert Instant.compose(2023, 2, 29, calendar=cal).offset == ts(2023, 3, 1)

    def test_compose_unresolvable_is_none(self, cal):
        assert Instant.compose(10_000, 1, 1, calendar=cal) is None

    @pytest.mark.parametrize("seconds", [float("nan"), float("inf"), float("-inf")])
    def test_compose_non_finite_seconds_is_none(self, cal, seconds):
        assert Instant.compose(2024, 1, 31, 10, 15, seconds, calendar=cal) is None

    def test_from_components(self, cal):
        i = Instant.from_components(DateComponents(year=2024, month=7, day=4), cal)
        assert i.offset == ts(2024, 7, 4)
        assert i.calendar is cal

    def test_now_uses_calendar_clock(self, cal):
        assert Instant.now(cal).offset == NOW

    def test_recompose_keeps_calendar(self, d, cal):
        other = d.recompose(DateComponents(year=2025, month=1, day=1))
        assert other.calendar is cal
        assert other.offset == ts(2025, 1, 1)


# ── Getters ───────────────────────────────────────────────────────────────────

class TestGetters:

    def test_weekday(self, d):
        assert d.weekday == 4   # Wednesday

    def test_seconds_is_real(self, d):
        assert isinstance(d.seconds, float)
        assert d.seconds == pytest.approx(30.5)

    def test_components_is_sparse(self, d):
        c = d.components(Field.MONTH)
        assert c.month == 1
        assert c.year is None

    def test_date_is_midnight(self, d):
        assert d.date.offset == ts(2024, 1, 31)


# ── Setters ───────────────────────────────────────────────────────────────────

class TestSetters:

    def test_with_year(self, d):
        assert fields(d.with_year(2020)) == (2020, 1, 31, 10, 15, pytest.approx(30.5))

    def test_with_year_from_leap_day_normalizes(self, cal):
        leap = Instant.compose(2024, 2, 29, calendar=cal)
        assert leap.with_year(2023).offset == ts(2023, 3, 1)

    def test_with_month_normalizes_day(self, d):
        # 31 February 2024 -> 2 March
        assert fields(d.with_month(2)) == (2024, 3, 2, 10, 15, pytest.approx(30.5))

    def test_with_month_thirteen(self, d):
        assert fields(d.with_month(13))[:3] == (2025, 1, 31)

    def test_with_day(self, d):
        assert fields(d.with_day(5)) == (2024, 1, 5, 10, 15, pytest.approx(30.5))

    def test_with_day_overflow(self, d):
        assert fields(d.with_day(32))[:3] == (2024, 2, 1)

    def test_with_hours_overflow(self, d):
        assert fields(d.with_hours(25)) == (2024, 2, 1, 1, 15, pytest.approx(30.5))

    def test_with_minutes_underflow(self, d):
        assert fields(d.with_minutes(-1)) == (2024, 1, 31, 9, 59, pytest.approx(30.5))

    def test_with_seconds_fraction(self, d):
        assert d.with_seconds(12.125).seconds == pytest.approx(12.125)

    def test_with_negative_seconds(self, d):
        assert fields(d.with_seconds(-0.25)) == (2024, 1, 31, 10, 14, pytest.approx(59.75))

    def test_setter_leaves_receiver_untouched(self, d):
        d.with_day(1)
        assert d.day == 31

    def test_setter_unresolvable_is_none(self, d):
        assert d.with_year(10_000) is None

    @pytest.mark.parametrize("seconds", [float("nan"), float("inf"), float("-inf")])
    def test_with_seconds_non_finite_is_none(self, d, seconds):
        assert d.with_seconds(seconds) is None

    def test_with_seconds_beyond_range_is_none(self, d):
        assert d.with_seconds(1e300) is None

    @pytest.mark.parametrize("setter, value", [
        ("with_year", 2030),
        ("with_month", 3),
        ("with_day", 5),
        ("with_hours", 7),
        ("with_minutes", 45),
        ("with_seconds", 2.5),
    ])
    def test_setters_are_idempotent(self, d, setter, value):
        once = getattr(d, setter)(value)
        twice = getattr(once, setter)(value)
        assert twice == once


# ── with_weekday ──────────────────────────────────────────────────────────────

class TestWithWeekday:

    def test_back_to_sunday(self, d):
        assert d.with_weekday(1).offset == ts(2024, 1, 28)

    def test_forward_into_next_month(self, d):
        # Saturday of the week of Wed 31 Jan is 3 Feb
        assert d.with_weekday(7).offset == ts(2024, 2, 3)

    def test_same_weekday_is_own_date(self, d):
        assert d.with_weekday(4) == d.date

    def test_across_year_boundary(self, cal):
        new_year = Instant.compose(2025, 1, 1, calendar=cal)   # Wednesday
        assert new_year.with_weekday(1).offset == ts(2024, 12, 29)


# ── Value semantics ───────────────────────────────────────────────────────────

class TestValueSemantics:

    def test_equality_ignores_calendar(self, cal):
        other = GregorianCalendar(tz=timezone.utc)
        assert Instant(5.0, cal) == Instant(5.0, other)

    def test_ordering(self, cal):
        assert Instant(1.0, cal) < Instant(2.0, cal)

    def test_hashable(self, cal):
        assert len({Instant(1.0, cal), Instant(1.0, cal)}) == 1

    def test_frozen(self, d):
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.offset = 0.0

    def test_ordinal_accessors(self, d):
        for name, ordinal in [("first", Ordinal.FIRST), ("second", Ordinal.SECOND),
                              ("third", Ordinal.THIRD), ("fourth", Ordinal.FOURTH),
                              ("fifth", Ordinal.FIFTH), ("last", Ordinal.LAST)]:
            accessor = getattr(d, name)
            assert isinstance(accessor, OrdinalAccessor)
            assert accessor.ordinal == ordinal
            assert accessor.reference is d
