"""
datekit
~~~~~~~

Calendar arithmetic on immutable instants: build dates from components,
read and replace single fields, shift by relative deltas and resolve
expressions such as "the last Friday of this month".

Basic usage::

    from datetime import timezone
    from datekit import Delta, GregorianCalendar, named

    cal = GregorianCalendar(tz=timezone.utc)
    d = named.date(2024, 2, 1, calendar=cal)
    d.last.friday                 # 23 February 2024
    d.fifth.monday                # None: February 2024 has four Mondays
    d + Delta.days(3)             # 4 February 2024
    Delta.hours(2).ago(cal)

Every calendar-dependent call takes the calendar explicitly or through the
instant it operates on; ``default_calendar()`` (local time, or the zone in
``DATEKIT_TZ``) fills in when none is given.

Public API
----------
Instant             Immutable point in time bound to a calendar.
Delta, Unit         Relative offsets of one calendar unit.
GregorianCalendar   Default calendar provider.
CalendarProvider    Protocol for custom providers.
DateComponents      Sparse record of calendar fields.
Field, Weekday      Field names and weekday numbering (Sunday=1).
Ordinal             FIRST..FIFTH and LAST.
OrdinalWeekdaySelector, resolve, nth_weekday
                    Ordinal weekday resolution.
named               date(), time(), today(), month and weekday shortcuts.
DatekitError        Base exception.
"""

from __future__ import annotations

import logging

from datekit import named
from datekit._exceptions import (
    CalendarError,
    DatekitError,
    DeltaError,
    SelectorError,
    UnknownUnitError,
)
from datekit.calendar import (
    CalendarProvider,
    DateComponents,
    Field,
    GregorianCalendar,
    Weekday,
    default_calendar,
)
from datekit.delta import Delta, Unit
from datekit.instant import Instant
from datekit.relative import Ordinal, OrdinalWeekdaySelector, nth_weekday, resolve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarError",
    "CalendarProvider",
    "DateComponents",
    "DatekitError",
    "Delta",
    "DeltaError",
    "Field",
    "GregorianCalendar",
    "Instant",
    "Ordinal",
    "OrdinalWeekdaySelector",
    "SelectorError",
    "Unit",
    "UnknownUnitError",
    "Weekday",
    "default_calendar",
    "named",
    "nth_weekday",
    "resolve",
]
