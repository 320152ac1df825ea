from __future__ import annotations

from typing import Optional

from datekit.calendar import CalendarEngine, default_engine
from datekit.clock import Clock, SystemClock

from .instant import Instant


def now(
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    """The clock's current time as an Instant bound to ``engine``."""
    clock = clock or SystemClock()
    return Instant(clock.now(), engine or default_engine(), clock)


def tomorrow(
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_days(1)


def yesterday(
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_days(1)


def next_weekday(
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_weekdays(1)


def previous_weekday(
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_weekdays(1)


def days_from_now(
    days: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_days(days)


def days_before_now(
    days: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_days(days)


def hours_from_now(
    hours: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_hours(hours)


def hours_before_now(
    hours: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_hours(hours)


def minutes_from_now(
    minutes: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_minutes(minutes)


def minutes_before_now(
    minutes: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_minutes(minutes)


def seconds_from_now(
    seconds: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).add_seconds(seconds)


def seconds_before_now(
    seconds: int,
    *,
    clock: Optional[Clock] = None,
    engine: Optional[CalendarEngine] = None,
) -> Instant:
    return now(clock=clock, engine=engine).subtract_seconds(seconds)
