class DatekitError(Exception):
    """Base class for all datekit errors."""


class CalendarError(DatekitError):
    """Raised when a calendar provider is misconfigured or cannot decompose an offset."""


class DeltaError(DatekitError, ValueError):
    """Raised when a Delta is built with a unit outside the supported set."""


class UnknownUnitError(DeltaError):
    """A Delta reached dispatch with a unit that has no setter; a programming error."""


class SelectorError(DatekitError, ValueError):
    """Raised for an ordinal or weekday outside its valid range."""
