from __future__ import annotations

import logging
import math
import os
import time as _time
from datetime import datetime, tzinfo
from typing import Callable, Iterable, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import numpy as np

from .._exceptions import CalendarError
from .components import NANOS_PER_SECOND, DateComponents, Field, split_seconds

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

TZ_ENV_VAR = "DATEKIT_TZ"


class GregorianCalendar:
    """
    Proleptic Gregorian calendar provider bound to one time zone and one clock.

    Recomposition normalizes out-of-range fields the way a wall calendar
    would: month 13 is January of the next year, day 0 is the last day of
    the previous month, hour -1 is 23:00 the day before.  The arithmetic is
    done on NumPy ``datetime64`` values, which carry month and second units
    natively, before the wall-clock time is pinned to the time zone.
    """

    def __init__(
        self,
        tz: Optional[tzinfo] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._tz: Optional[tzinfo] = tz
        self._clock: Clock = clock if clock is not None else _time.time

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GregorianCalendar:
        """Build a calendar for the zone named by ``DATEKIT_TZ`` (local time when unset)."""
        env = os.environ if environ is None else environ
        name = env.get(TZ_ENV_VAR, "").strip()
        if not name:
            return cls()
        try:
            return cls(tz=ZoneInfo(name))
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise CalendarError(f"Unknown time zone {name!r} in {TZ_ENV_VAR}.") from exc

    # ── provider protocol ────────────────────────────────────────────────

    def now(self) -> float:
        return float(self._clock())

    def decompose(self, offset: float, fields: Iterable[Field]) -> DateComponents:
        if not math.isfinite(offset):
            raise CalendarError(f"Cannot decompose non-finite offset {offset!r}.")

        whole, nanos = split_seconds(offset)

        try:
            wall = datetime.fromtimestamp(whole, self._tz)
        except (OverflowError, OSError, ValueError) as exc:
            raise CalendarError(f"Offset {offset!r} is outside the calendar's range.") from exc

        values = {
            Field.YEAR: wall.year,
            Field.MONTH: wall.month,
            Field.DAY: wall.day,
            Field.HOUR: wall.hour,
            Field.MINUTE: wall.minute,
            Field.SECOND: wall.second,
            Field.NANOSECOND: nanos,
            # isoweekday: Monday=1..Sunday=7 -> Sunday=1..Saturday=7
            Field.WEEKDAY: wall.isoweekday() % 7 + 1,
        }
        return DateComponents(**{Field(f).value: values[Field(f)] for f in fields})

    def recompose(self, components: DateComponents) -> Optional[float]:
        wall = self._wall_clock(components)
        if wall is None:
            return None
        try:
            if self._tz is None:
                base = wall.timestamp()
            else:
                base = wall.replace(tzinfo=self._tz).timestamp()
        except (OverflowError, OSError, ValueError):
            logger.debug("Wall-clock time %s cannot be placed in zone %r.", wall, self._tz)
            return None
        offset = base + (components.nanosecond or 0) / NANOS_PER_SECOND

        # The zone offset can push a wall time near year 1 or 9999 out of range.
        try:
            datetime.fromtimestamp(math.floor(offset), self._tz)
        except (OverflowError, OSError, ValueError):
            logger.debug("Offset %r for %s cannot be decomposed in zone %r.", offset, wall, self._tz)
            return None
        return offset

    # ── normalization ────────────────────────────────────────────────────

    @staticmethod
    def _wall_clock(components: DateComponents) -> Optional[datetime]:
        year = 1 if components.year is None else int(components.year)
        month = 1 if components.month is None else int(components.month)
        day = 1 if components.day is None else int(components.day)
        hour = int(components.hour or 0)
        minute = int(components.minute or 0)
        second = int(components.second or 0)

        try:
            months = np.datetime64((year - 1970) * 12 + (month - 1), "M")
            wall = (
                months.astype("datetime64[s]")
                + np.timedelta64(day - 1, "D")
                + np.timedelta64(hour, "h")
                + np.timedelta64(minute, "m")
                + np.timedelta64(second, "s")
            )
        except (OverflowError, ValueError):
            logger.debug("Components %s overflow the calendar.", components.present())
            return None

        # .item() yields a datetime only inside years 1..9999; an int otherwise.
        value = wall.item()
        if not isinstance(value, datetime):
            logger.debug("Components %s normalize outside years 1..9999.", components.present())
            return None
        return value

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def tz(self) -> Optional[tzinfo]:
        return self._tz

    def __repr__(self) -> str:
        zone = "local" if self._tz is None else str(self._tz)
        return f"GregorianCalendar(tz={zone!r})"


def default_calendar() -> GregorianCalendar:
    """The provider used whenever a ``calendar`` argument is omitted."""
    return GregorianCalendar.from_env()
