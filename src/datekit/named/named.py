from __future__ import annotations

import math
from typing import Optional

from ..calendar.components import CalendarProvider, DateComponents, Weekday, split_seconds
from ..calendar.gregorian import default_calendar
from ..instant.instant import Instant


def date(
    year: int, month: int, day: int, calendar: Optional[CalendarProvider] = None
) -> Optional[Instant]:
    return Instant.from_components(DateComponents(year=year, month=month, day=day), calendar)


def time(
    hours: int, minutes: int, seconds: float, calendar: Optional[CalendarProvider] = None
) -> Optional[Instant]:
    """A time of day on the calendar's default date (1 January of year 1)."""
    if not math.isfinite(seconds):
        return None
    whole, nanos = split_seconds(seconds)
    components = DateComponents(hour=hours, minute=minutes, second=whole, nanosecond=nanos)
    return Instant.from_components(components, calendar)


def today(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    cal = calendar if calendar is not None else default_calendar()
    return Instant.now(cal).date


# ── months ───────────────────────────────────────────────────────────────────

def _first_of(month: int, calendar: Optional[CalendarProvider]) -> Optional[Instant]:
    # Day first: moving the 31st to a short month would spill into the next.
    start = today(calendar)
    if start is None:
        return None
    start = start.with_day(1)
    if start is None:
        return None
    return start.with_month(month)


def january(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(1, calendar)


def february(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(2, calendar)


def march(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(3, calendar)


def april(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(4, calendar)


def may(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(5, calendar)


def june(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(6, calendar)


def july(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(7, calendar)


def august(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(8, calendar)


def september(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(9, calendar)


def october(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(10, calendar)


def november(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(11, calendar)


def december(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _first_of(12, calendar)


jan = january
feb = february
mar = march
apr = april
jun = june
jul = july
aug = august
sep = september
oct = october
nov = november
dec = december


# ── weekdays ─────────────────────────────────────────────────────────────────

def _this_week(weekday: int, calendar: Optional[CalendarProvider]) -> Optional[Instant]:
    start = today(calendar)
    return start.with_weekday(weekday) if start is not None else None


def sunday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.SUNDAY, calendar)


def monday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.MONDAY, calendar)


def tuesday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.TUESDAY, calendar)


def wednesday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.WEDNESDAY, calendar)


def thursday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.THURSDAY, calendar)


def friday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.FRIDAY, calendar)


def saturday(calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
    return _this_week(Weekday.SATURDAY, calendar)
