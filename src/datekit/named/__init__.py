"""
datekit.named
~~~~~~~~~~~~~

Constructors and named dates relative to today.

Basic usage::

    from datekit import named

    named.date(2024, 2, 1)         # midnight, 1 February 2024
    named.time(9, 30, 0.5)         # 09:30:00.5 on the calendar's default date
    named.today()
    named.february().last.friday   # last Friday of February this year
    named.monday()                 # Monday of the current week

Every function takes an optional ``calendar``; with a calendar whose clock
is fixed the results are deterministic.  All return ``None`` when the
calendar cannot resolve the date.
"""

from __future__ import annotations

from datekit.named.named import (
    apr,
    april,
    aug,
    august,
    date,
    dec,
    december,
    feb,
    february,
    friday,
    jan,
    january,
    jul,
    july,
    jun,
    june,
    mar,
    march,
    may,
    monday,
    nov,
    november,
    oct,
    october,
    saturday,
    sep,
    september,
    sunday,
    thursday,
    time,
    today,
    tuesday,
    wednesday,
)

__all__ = [
    "apr", "april", "aug", "august", "date", "dec", "december", "feb",
    "february", "friday", "jan", "january", "jul", "july", "jun", "june",
    "mar", "march", "may", "monday", "nov", "november", "oct", "october",
    "saturday", "sep", "september", "sunday", "thursday", "time", "today",
    "tuesday", "wednesday",
]
