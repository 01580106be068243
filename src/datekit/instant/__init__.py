"""
datekit.instant
~~~~~~~~~~~~~~~

Immutable instants with calendar-field access.  Reading a field decomposes
the instant through its calendar; replacing a field decomposes the whole
date and time, overwrites that one field and recomposes, letting the
calendar normalize anything that no longer fits.

Basic usage::

    from datetime import timezone
    from datekit.calendar import GregorianCalendar
    from datekit.instant import Instant

    cal = GregorianCalendar(tz=timezone.utc)
    d = Instant.compose(2024, 1, 31, 9, 30, 15.25, calendar=cal)
    d.seconds                 # 15.25
    d.with_month(2)           # 2 March 2024 09:30:15.25 (Feb 31 normalized)
    d.with_weekday(1)         # Sunday 28 January 2024, midnight

Public API
----------
Instant   Point in time plus its calendar.
"""

from __future__ import annotations

from datekit.instant.instant import Instant

__all__ = ["Instant"]
