"""
datekit.delta
~~~~~~~~~~~~~

Relative offsets of one calendar unit.  A delta moves one field of an
instant (year, month, day, hour, minute or second) and lets the calendar
normalize the rest; ``before`` is ``after`` with the magnitude negated.

Basic usage::

    from datekit.delta import Delta

    Delta.days(3).after(d)        # same as d + Delta.days(3)
    Delta.hours(2).before(d)      # same as d - Delta.hours(2)
    Delta.minutes(15).from_now()
    Delta.seconds(1.5).ago(calendar=cal)

Public API
----------
Delta             (magnitude, unit) value with factories and operators.
Unit              The closed set of units.
DeltaError        Raised for an invalid unit at construction.
UnknownUnitError  Raised if an invalid unit ever reaches dispatch.
"""

from __future__ import annotations

from datekit._exceptions import DeltaError, UnknownUnitError
from datekit.delta.delta import Delta, Unit

__all__ = [
    "Delta",
    "DeltaError",
    "Unit",
    "UnknownUnitError",
]
