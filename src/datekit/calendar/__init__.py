"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar providers.  A provider turns an epoch offset into calendar fields
(year, month, day, hour, minute, second, nanosecond, weekday) and turns a
sparse set of fields back into an offset, normalizing out-of-range values.

Basic usage::

    from datetime import timezone
    from datekit.calendar import DateComponents, Field, GregorianCalendar

    cal = GregorianCalendar(tz=timezone.utc)
    cal.decompose(0.0, [Field.YEAR, Field.WEEKDAY])  # year=1970, weekday=5
    cal.recompose(DateComponents(year=2024, month=2, day=30))  # -> 1 March 2024

Public API
----------
CalendarProvider   Protocol every provider implements.
GregorianCalendar  NumPy-backed proleptic Gregorian provider.
DateComponents     Sparse record of calendar fields.
Field, Weekday     Field names and the Sunday=1 weekday numbering.
default_calendar   Provider used when no calendar is passed.
CalendarError      Raised for misconfiguration or undecomposable offsets.
"""

from __future__ import annotations

from datekit._exceptions import CalendarError
from datekit.calendar.components import (
    CalendarProvider,
    DateComponents,
    Field,
    Weekday,
)
from datekit.calendar.gregorian import GregorianCalendar, default_calendar

__all__ = [
    "CalendarError",
    "CalendarProvider",
    "DateComponents",
    "Field",
    "GregorianCalendar",
    "Weekday",
    "default_calendar",
]
