from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .._exceptions import DeltaError, UnknownUnitError
from ..calendar.components import CalendarProvider
from ..instant.instant import Instant


class Unit(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


@dataclass(frozen=True, slots=True)
class Delta:
    """
    Signed quantity of one calendar unit, e.g. ``Delta.days(3)``.

    Applying a delta moves a single field through the instant's setter, so
    ``Delta.months(1)`` after 31 January lands on 2 or 3 March: the calendar
    normalizes 31 February, the delta does not clamp.  Year to minute
    magnitudes are truncated toward zero; seconds keep their fraction.
    """

    magnitude: float
    unit: Unit

    def __post_init__(self) -> None:
        try:
            unit = Unit(self.unit)
        except ValueError:
            raise DeltaError(f"Unknown delta unit {self.unit!r}.") from None
        magnitude = float(self.magnitude)
        if not math.isfinite(magnitude):
            raise DeltaError(f"Delta magnitude must be finite; got {magnitude!r}.")
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "magnitude", magnitude)

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def years(cls, n: float) -> Delta:
        return cls(n, Unit.YEAR)

    @classmethod
    def months(cls, n: float) -> Delta:
        return cls(n, Unit.MONTH)

    @classmethod
    def days(cls, n: float) -> Delta:
        return cls(n, Unit.DAY)

    @classmethod
    def hours(cls, n: float) -> Delta:
        return cls(n, Unit.HOUR)

    @classmethod
    def minutes(cls, n: float) -> Delta:
        return cls(n, Unit.MINUTE)

    @classmethod
    def seconds(cls, n: float) -> Delta:
        return cls(n, Unit.SECOND)

    year = years
    month = months
    day = days
    hour = hours
    minute = minutes
    second = seconds

    # ── application ──────────────────────────────────────────────────────

    def negated(self) -> Delta:
        return Delta(-self.magnitude, self.unit)

    def __neg__(self) -> Delta:
        return self.negated()

    def after(self, instant: Instant) -> Optional[Instant]:
        n = int(self.magnitude)
        unit = self.unit
        if unit is Unit.YEAR:
            return instant.with_year(instant.year + n)
        if unit is Unit.MONTH:
            return instant.with_month(instant.month + n)
        if unit is Unit.DAY:
            return instant.with_day(instant.day + n)
        if unit is Unit.HOUR:
            return instant.with_hours(instant.hours + n)
        if unit is Unit.MINUTE:
            return instant.with_minutes(instant.minutes + n)
        if unit is Unit.SECOND:
            return instant.with_seconds(instant.seconds + self.magnitude)
        # Unreachable unless the frozen instance was tampered with.
        raise UnknownUnitError(f"No setter for delta unit {unit!r}.")

    def before(self, instant: Instant) -> Optional[Instant]:
        return self.negated().after(instant)

    def from_now(self, calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
        return self.after(Instant.now(calendar))

    def ago(self, calendar: Optional[CalendarProvider] = None) -> Optional[Instant]:
        return self.negated().from_now(calendar)

    # ── operators ────────────────────────────────────────────────────────

    def __add__(self, other: Any) -> Union[Optional[Instant], Any]:
        if isinstance(other, Instant):
            return self.after(other)
        return NotImplemented

    __radd__ = __add__

    def __rsub__(self, other: Any) -> Union[Optional[Instant], Any]:
        if isinstance(other, Instant):
            return self.before(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Delta({self.magnitude:g} {self.unit.value})"

