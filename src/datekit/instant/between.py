from __future__ import annotations

import dataclasses
from typing import Optional, Tuple

from datekit.calendar import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    CalendarEngine,
    Unit,
    default_engine,
    trunc_divmod,
)

from .instant import DateLike, Instant


def _instant(value: DateLike, engine: Optional[CalendarEngine]) -> Instant:
    if isinstance(value, Instant):
        if engine is None or engine is value.engine:
            return value
        return dataclasses.replace(value, engine=engine)
    return Instant(value, engine or default_engine())


def _between(unit: Unit, a: DateLike, b: DateLike, engine: Optional[CalendarEngine]) -> int:
    first = _instant(a, engine)
    return first.difference(unit, _instant(b, engine or first.engine))


def seconds_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.SECOND, a, b, engine)


def minutes_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.MINUTE, a, b, engine)


def hours_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.HOUR, a, b, engine)


def days_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.DAY, a, b, engine)


def weeks_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.WEEK, a, b, engine)


def months_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.MONTH, a, b, engine)


def years_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    return _between(Unit.YEAR, a, b, engine)


def hours_minutes_seconds_between(
    a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None
) -> Tuple[int, int, int]:
    """Absolute elapsed time split into (hours, minutes, seconds)."""
    total = abs(seconds_between(a, b, engine=engine))
    hours, rest = divmod(total, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return hours, minutes, seconds


def weekdays_between(a: DateLike, b: DateLike, *, engine: Optional[CalendarEngine] = None) -> int:
    """
    Approximate business days from ``a`` to ``b``.

    ``a`` is moved forward and ``b`` backward off any weekend, the calendar
    days between them are counted five per full week, and two are taken off
    when the span wraps a weekend.  Holidays are not considered and the
    result can be off by one around week boundaries.
    """
    first = _instant(a, engine).nearest_weekday(1)
    last = _instant(b, engine or first.engine).nearest_weekday(-1)

    weeks, rest = trunc_divmod(days_between(first, last), 7)
    result = weeks * 5 + rest
    if last.weekday < first.weekday:
        result -= 2
    return result
