"""
datekit.relative
~~~~~~~~~~~~~~~~

Ordinal weekday resolution: "the first Monday", "the last Friday" of the
month a reference instant falls in.

Basic usage::

    from datekit.named import date
    from datekit.relative import Ordinal, Weekday, nth_weekday

    feb = date(2024, 2, 1)
    feb.last.friday                                   # 23 February 2024
    nth_weekday(feb, Ordinal.FIFTH, Weekday.MONDAY)   # None: only four Mondays

A miss is ``None``, never an exception.  Counting starts from the week that
contains the reference, so pass the 1st of a month for calendar semantics.

Public API
----------
OrdinalWeekdaySelector  (reference, ordinal, weekday) value.
resolve                 Resolve a selector to an Instant or None.
nth_weekday             Shorthand for resolve(OrdinalWeekdaySelector(...)).
OrdinalAccessor         Backs Instant.first .. Instant.last.
Ordinal, Weekday        Ordinal and weekday numbering.
SelectorError           Raised for an out-of-range ordinal or weekday.
"""

from __future__ import annotations

from datekit._exceptions import SelectorError
from datekit.calendar.components import Weekday
from datekit.relative.relative import (
    Ordinal,
    OrdinalAccessor,
    OrdinalWeekdaySelector,
    nth_weekday,
    resolve,
)

__all__ = [
    "Ordinal",
    "OrdinalAccessor",
    "OrdinalWeekdaySelector",
    "SelectorError",
    "Weekday",
    "nth_weekday",
    "resolve",
]
