from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from .._exceptions import SelectorError
from ..calendar.components import DateComponents, Field, Weekday

if TYPE_CHECKING:
    from ..instant.instant import Instant

logger = logging.getLogger(__name__)


class Ordinal(IntEnum):
    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    LAST = -1


# "last" is searched as the highest index that still lands in the month.
_LAST_SEARCH: tuple[int, ...] = (5, 4, 3, 2, 1)


@dataclass(frozen=True, slots=True)
class OrdinalWeekdaySelector:
    """
    "The <ordinal> <weekday> of the reference month."

    Occurrences are counted from the week containing ``reference``: the
    first occurrence is the one in that week when the target weekday is the
    reference's weekday or later, otherwise the one in the following week.
    With a reference on the 1st this is the usual calendar reading.
    """

    reference: Instant
    ordinal: int
    weekday: int

    def __post_init__(self) -> None:
        if self.ordinal != Ordinal.LAST and not 0 <= self.ordinal <= Ordinal.FIFTH:
            raise SelectorError(f"Ordinal must be -1 (last) or 0..4; got {self.ordinal}.")
        if not Weekday.SUNDAY <= self.weekday <= Weekday.SATURDAY:
            raise SelectorError(f"Weekday must be 1 (Sunday)..7 (Saturday); got {self.weekday}.")


def resolve(selector: OrdinalWeekdaySelector) -> Optional[Instant]:
    """Resolve ``selector`` to midnight of the matching day, or ``None`` if the month has none."""
    if selector.ordinal == Ordinal.LAST:
        for index in _LAST_SEARCH:
            found = _resolve_index(selector.reference, index, selector.weekday)
            if found is not None:
                return found
        logger.debug("No last weekday %d in the month of %r.", selector.weekday, selector.reference)
        return None

    found = _resolve_index(selector.reference, selector.ordinal, selector.weekday)
    if found is None:
        logger.debug(
            "Ordinal %d of weekday %d not in the month of %r.",
            selector.ordinal, selector.weekday, selector.reference,
        )
    return found


def _resolve_index(reference: Instant, index: int, weekday: int) -> Optional[Instant]:
    c = reference.components(Field.YEAR, Field.MONTH, Field.DAY, Field.WEEKDAY)

    # Target already passed this week: its first occurrence is next week.
    adjusted = index if weekday >= c.weekday else index + 1
    day = c.day + weekday + 7 * adjusted - c.weekday

    candidate = reference.recompose(DateComponents(year=c.year, month=c.month, day=day))
    # An index past the month's last occurrence rolls into the next month.
    if candidate is None or candidate.month != c.month:
        return None
    return candidate


def nth_weekday(reference: Instant, ordinal: int, weekday: int) -> Optional[Instant]:
    return resolve(OrdinalWeekdaySelector(reference, ordinal, weekday))


class OrdinalAccessor:
    """Bound ``(reference, ordinal)`` pair; ``date.last.friday`` reads through it."""

    __slots__ = ("_reference", "_ordinal")

    def __init__(self, reference: Instant, ordinal: int) -> None:
        self._reference = reference
        self._ordinal = ordinal

    def weekday(self, weekday: int) -> Optional[Instant]:
        return nth_weekday(self._reference, self._ordinal, weekday)

    @property
    def sunday(self) -> Optional[Instant]:
        return self.weekday(Weekday.SUNDAY)

    @property
    def monday(self) -> Optional[Instant]:
        return self.weekday(Weekday.MONDAY)

    @property
    def tuesday(self) -> Optional[Instant]:
        return self.weekday(Weekday.TUESDAY)

    @property
    def wednesday(self) -> Optional[Instant]:
        return self.weekday(Weekday.WEDNESDAY)

    @property
    def thursday(self) -> Optional[Instant]:
        return self.weekday(Weekday.THURSDAY)

    @property
    def friday(self) -> Optional[Instant]:
        return self.weekday(Weekday.FRIDAY)

    @property
    def saturday(self) -> Optional[Instant]:
        return self.weekday(Weekday.SATURDAY)

    @property
    def reference(self) -> Instant:
        return self._reference

    @property
    def ordinal(self) -> int:
        return self._ordinal

    def __repr__(self) -> str:
        return f"OrdinalAccessor(reference={self._reference!r}, ordinal={self._ordinal})"
