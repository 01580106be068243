from __future__ import annotations

import math
from dataclasses import dataclass, fields as _dc_fields, replace
from enum import Enum, IntEnum
from typing import Iterable, Optional, Protocol, runtime_checkable


class Field(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    NANOSECOND = "nanosecond"
    WEEKDAY = "weekday"


class Weekday(IntEnum):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


NANOS_PER_SECOND = 1_000_000_000

# Fields a setter reads back before overwriting one of them.
FULL_TUPLE: tuple[Field, ...] = (
    Field.YEAR,
    Field.MONTH,
    Field.DAY,
    Field.HOUR,
    Field.MINUTE,
    Field.SECOND,
    Field.NANOSECOND,
)


@dataclass(frozen=True, slots=True)
class DateComponents:
    """
    Sparse record of calendar fields.

    A field that was not requested is ``None``, never zero: a decomposition
    asked for ``{year, month}`` leaves ``day`` absent, and a recomposition
    fills absent fields with the provider's defaults.
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    nanosecond: Optional[int] = None
    weekday: Optional[int] = None

    def replace(self, **changes: Optional[int]) -> DateComponents:
        return replace(self, **changes)

    def get(self, field: Field | str) -> Optional[int]:
        return getattr(self, Field(field).value)

    def present(self) -> dict[str, int]:
        """Only the populated fields, keyed by name."""
        out: dict[str, int] = {}
        for f in _dc_fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        return out


@runtime_checkable
class CalendarProvider(Protocol):
    """
    Decomposes epoch offsets into calendar fields and back.

    Offsets are real-valued seconds since the Unix epoch.  ``recompose``
    returns ``None`` rather than raising when the fields cannot be resolved.
    """

    def decompose(self, offset: float, fields: Iterable[Field]) -> DateComponents: ...

    def recompose(self, components: DateComponents) -> Optional[float]: ...

    def now(self) -> float: ...


def split_seconds(seconds: float) -> tuple[int, int]:
    """Split real seconds into ``(whole, nanoseconds)`` with ``0 <= nanoseconds < 1e9``."""
    whole = math.floor(seconds)
    nanos = round((seconds - whole) * NANOS_PER_SECOND)
    if nanos >= NANOS_PER_SECOND:
        whole += 1
        nanos -= NANOS_PER_SECOND
    return int(whole), int(nanos)
