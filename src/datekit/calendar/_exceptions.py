class CalendarError(Exception):
    """Base class for every error raised by datekit."""


class InvalidComponentsError(CalendarError, ValueError):
    """A component set does not name a real wall-clock time in the engine's zone."""


class UnknownTimeZoneError(CalendarError, LookupError):
    """A time-zone name could not be resolved."""


class ParseError(CalendarError, ValueError):
    """Text is not an ISO 8601 timestamp in the form datekit renders."""
