"""
datekit.calendar
~~~~~~~~~~~~~~~~

The calendar engine every datekit operation delegates to.  A CalendarEngine
is bound to one time zone and a week-numbering convention; it decomposes
instants into calendar components, adds signed component deltas, measures
single-unit differences, rebuilds instants from components and renders
them as text.

Basic usage::

    from datetime import datetime
    from datekit.calendar import CalendarEngine, Unit

    cal = CalendarEngine("Europe/Amsterdam")
    start = datetime(2024, 1, 31, 9, 0)
    end = cal.add(start, months=1)                  # → 2024-02-29 09:00+01:00
    cal.difference(Unit.DAY, start, end)            # → 29
    cal.components(end).weekday                     # → 5 (Thursday)

Public API
----------
CalendarEngine          Zone-bound calendar.
ComponentSet            Calendar fields of one instant.
Unit, Style, Weekday    Enumerations used by the engine.
default_engine          Process-wide engine in the local zone.
set_default_engine      Replace the process-wide engine.
CalendarError           Base exception for all datekit errors.
"""

from __future__ import annotations

from datekit.calendar._exceptions import (
    CalendarError,
    InvalidComponentsError,
    ParseError,
    UnknownTimeZoneError,
)
from datekit.calendar.calendar import (
    CalendarEngine,
    default_engine,
    set_default_engine,
    trunc_divmod,
)
from datekit.calendar.components import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    ComponentSet,
    Style,
    Unit,
    Weekday,
)

__all__ = [
    "CalendarEngine",
    "ComponentSet",
    "Style",
    "Unit",
    "Weekday",
    "default_engine",
    "set_default_engine",
    "trunc_divmod",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "CalendarError",
    "InvalidComponentsError",
    "ParseError",
    "UnknownTimeZoneError",
]
