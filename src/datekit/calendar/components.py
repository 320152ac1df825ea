from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Weekday numbering used throughout datekit: Sunday is 1, Saturday is 7."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def of(cls, value) -> "Weekday":
        # date.isoweekday(): Monday=1 ... Sunday=7
        return cls(value.isoweekday() % 7 + 1)

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


class Unit(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Style(Enum):
    """Fixed date/time rendering styles, in increasing verbosity."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 604800


@dataclass(frozen=True)
class ComponentSet:
    """
    Calendar fields of one instant as seen by a CalendarEngine.

    ``weekday`` always uses Sunday=1 numbering; ``week_of_year`` depends on the
    engine's first weekday and minimum days in the first week.
    ``weekday_ordinal`` is the n-th occurrence of this weekday in the month.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    week_of_year: int
    weekday: int
    weekday_ordinal: int

    def same_date(self, other: "ComponentSet") -> bool:
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)
