from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..calendar.components import (
    FULL_TUPLE,
    NANOS_PER_SECOND,
    CalendarProvider,
    DateComponents,
    Field,
    split_seconds,
)
from ..calendar.gregorian import default_calendar
from ..relative.relative import Ordinal, OrdinalAccessor

if TYPE_CHECKING:
    from ..delta.delta import Delta


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """
    Immutable point in time: ``offset`` seconds since the Unix epoch.

    The instant remembers the calendar it was built against; component
    getters and setters read and write fields through that calendar.  Two
    instants are equal when their offsets are, whatever their calendars.

    Setters return ``None`` when the calendar cannot resolve the result.
    """

    offset: float
    calendar: CalendarProvider = field(default_factory=default_calendar, compare=False, repr=False)

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def now(cls, calendar: Optional[CalendarProvider] = None) -> Instant:
        cal = calendar if calendar is not None else default_calendar()
        return cls(cal.now(), cal)

    @classmethod
    def from_components(
        cls,
        components: DateComponents,
        calendar: Optional[CalendarProvider] = None,
    ) -> Optional[Instant]:
        cal = calendar if calendar is not None else default_calendar()
        offset = cal.recompose(components)
        return None if offset is None else cls(offset, cal)

    @classmethod
    def compose(
        cls,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        seconds: float = 0.0,
        calendar: Optional[CalendarProvider] = None,
    ) -> Optional[Instant]:
        if not math.isfinite(seconds):
            return None
        whole, nanos = split_seconds(seconds)
        components = DateComponents(
            year=year, month=month, day=day,
            hour=hours, minute=minutes, second=whole, nanosecond=nanos,
        )
        return cls.from_components(components, calendar)

    # ── decompose / recompose ────────────────────────────────────────────

    def components(self, *fields: Field) -> DateComponents:
        return self.calendar.decompose(self.offset, fields)

    def recompose(self, components: DateComponents) -> Optional[Instant]:
        """New instant on this instant's calendar, or ``None`` if unresolvable."""
        offset = self.calendar.recompose(components)
        return None if offset is None else Instant(offset, self.calendar)

    # ── getters ──────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self.components(Field.YEAR).year

    @property
    def month(self) -> int:
        return self.components(Field.MONTH).month

    @property
    def day(self) -> int:
        return self.components(Field.DAY).day

    @property
    def hours(self) -> int:
        return self.components(Field.HOUR).hour

    @property
    def minutes(self) -> int:
        return self.components(Field.MINUTE).minute

    @property
    def seconds(self) -> float:
        c = self.components(Field.SECOND, Field.NANOSECOND)
        return c.second + c.nanosecond / NANOS_PER_SECOND

    @property
    def weekday(self) -> int:
        return self.components(Field.WEEKDAY).weekday

    @property
    def date(self) -> Optional[Instant]:
        """Midnight of the same calendar day."""
        c = self.components(Field.YEAR, Field.MONTH, Field.DAY)
        return self.recompose(c)

    # ── setters ──────────────────────────────────────────────────────────

    def _with(self, **changes: int) -> Optional[Instant]:
        # Every other field is re-read and written back unchanged; overflow
        # in any of them is left to the calendar's normalization.
        full = self.components(*FULL_TUPLE)
        return self.recompose(full.replace(**changes))

    def with_year(self, year: int) -> Optional[Instant]:
        return self._with(year=int(year))

    def with_month(self, month: int) -> Optional[Instant]:
        return self._with(month=int(month))

    def with_day(self, day: int) -> Optional[Instant]:
        return self._with(day=int(day))

    def with_hours(self, hours: int) -> Optional[Instant]:
        return self._with(hour=int(hours))

    def with_minutes(self, minutes: int) -> Optional[Instant]:
        return self._with(minute=int(minutes))

    def with_seconds(self, seconds: float) -> Optional[Instant]:
        if not math.isfinite(seconds):
            return None
        whole, nanos = split_seconds(seconds)
        return self._with(second=whole, nanosecond=nanos)

    def with_weekday(self, weekday: int) -> Optional[Instant]:
        """
        The day in this instant's week (Sunday to Saturday) with the given
        weekday, at midnight.  The result may fall in an adjacent month.
        """
        c = self.components(Field.YEAR, Field.MONTH, Field.DAY, Field.WEEKDAY)
        return self.recompose(
            DateComponents(year=c.year, month=c.month, day=c.day + (int(weekday) - c.weekday))
        )

    # ── ordinal weekdays ─────────────────────────────────────────────────

    @property
    def first(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.FIRST)

    @property
    def second(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.SECOND)

    @property
    def third(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.THIRD)

    @property
    def fourth(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.FOURTH)

    @property
    def fifth(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.FIFTH)

    @property
    def last(self) -> OrdinalAccessor:
        return OrdinalAccessor(self, Ordinal.LAST)

    # ── deltas ───────────────────────────────────────────────────────────

    def add_delta(self, delta: Delta) -> Optional[Instant]:
        return delta.after(self)

    def subtract_delta(self, delta: Delta) -> Optional[Instant]:
        return delta.before(self)
