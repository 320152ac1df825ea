"""
datekit.instant
~~~~~~~~~~~~~~~

Convenience operations on points in time: calendar arithmetic, business-day
arithmetic, relative-date predicates, component accessors and formatting.
All calendar work is delegated to a CalendarEngine; "now" comes from a Clock.

Basic usage::

    from datetime import datetime, timezone
    from datekit.calendar import CalendarEngine
    from datekit.instant import Instant, hours_minutes_seconds_between

    cal = CalendarEngine("UTC")
    fri = Instant(datetime(2024, 3, 8, 9, 0), cal)     # Friday
    fri.add_weekdays(1)                                  # → Monday 2024-03-11 09:00
    fri.start_of_week(use_iso8601=True)                  # → Monday 2024-03-04 00:00
    fri.iso8601_for_files_string                         # → '20240308T090000+0000'
    hours_minutes_seconds_between(fri, fri.add_seconds(3725))   # → (1, 2, 5)

Relative to now::

    from datekit.clock import FixedClock
    from datekit.instant import days_from_now

    clock = FixedClock.fixed(year=2024, month=3, day=4)
    days_from_now(3, clock=clock, engine=cal).is_today()   # → False

Public API
----------
Instant                          The point-in-time value type.
now, tomorrow, yesterday, ...    Factories relative to a clock's now.
seconds_between, ..., weekdays_between
                                 Differences between two instants.
"""

from __future__ import annotations

from datekit.instant.between import (
    days_between,
    hours_between,
    hours_minutes_seconds_between,
    minutes_between,
    months_between,
    seconds_between,
    weekdays_between,
    weeks_between,
    years_between,
)
from datekit.instant.instant import Instant
from datekit.instant.relative import (
    days_before_now,
    days_from_now,
    hours_before_now,
    hours_from_now,
    minutes_before_now,
    minutes_from_now,
    next_weekday,
    now,
    previous_weekday,
    seconds_before_now,
    seconds_from_now,
    tomorrow,
    yesterday,
)

__all__ = [
    "Instant",
    "now",
    "tomorrow",
    "yesterday",
    "next_weekday",
    "previous_weekday",
    "days_from_now",
    "days_before_now",
    "hours_from_now",
    "hours_before_now",
    "minutes_from_now",
    "minutes_before_now",
    "seconds_from_now",
    "seconds_before_now",
    "seconds_between",
    "minutes_between",
    "hours_between",
    "days_between",
    "weeks_between",
    "months_between",
    "years_between",
    "hours_minutes_seconds_between",
    "weekdays_between",
]
