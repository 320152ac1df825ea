from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from functools import total_ordering
from typing import Optional, Union

from datekit.calendar import (
    SECONDS_PER_WEEK,
    CalendarEngine,
    ComponentSet,
    Style,
    Unit,
    Weekday,
    default_engine,
)
from datekit.clock import Clock, SystemClock

DateLike = Union["Instant", datetime]


@total_ordering
@dataclass(frozen=True, eq=False)
class Instant:
    """
    Immutable point in time seen through a CalendarEngine.

    Equality, ordering and hashing use the timestamp only; the engine and
    clock decide how the instant is decomposed and what "now" means for the
    relative predicates.  Every transform returns a new Instant carrying the
    same engine and clock.
    """

    value: datetime
    engine: CalendarEngine = field(default_factory=default_engine)
    clock: Clock = field(default_factory=SystemClock)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.engine.localize(self.value))

    @classmethod
    def from_iso8601(
        cls,
        text: str,
        *,
        engine: Optional[CalendarEngine] = None,
        clock: Optional[Clock] = None,
    ) -> "Instant":
        engine = engine or default_engine()
        return cls(engine.parse_iso8601(text), engine, clock or SystemClock())

    # ── plumbing ─────────────────────────────────────────────────────────

    def _derive(self, value: datetime) -> "Instant":
        return dataclasses.replace(self, value=value)

    def _coerce(self, other: DateLike) -> "Instant":
        if isinstance(other, Instant):
            return other
        return self._derive(other)

    def _now(self) -> "Instant":
        return self._derive(self.clock.now())

    def _shift(self, **deltas: int) -> "Instant":
        return self._derive(self.engine.add(self.value, **deltas))

    def _rebuild(self, c: ComponentSet, hour: int, minute: int, second: int) -> "Instant":
        return self._derive(
            self.engine.from_components(c.year, c.month, c.day, hour, minute, second)
        )

    @property
    def components(self) -> ComponentSet:
        return self.engine.components(self.value)

    def to_datetime(self) -> datetime:
        return self.value

    # ── comparison ───────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Instant):
            return self.value == other.value
        if isinstance(other, datetime):
            return self.value == self.engine.localize(other)
        return NotImplemented

    def __lt__(self, other: DateLike) -> bool:
        if isinstance(other, (Instant, datetime)):
            return self.value < self._coerce(other).value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Instant({self.value.isoformat()})"

    # ── component accessors ──────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self.components.year

    @property
    def month(self) -> int:
        return self.components.month

    @property
    def week(self) -> int:
        return self.components.week_of_year

    @property
    def day(self) -> int:
        return self.components.day

    @property
    def hour(self) -> int:
        return self.components.hour

    @property
    def minute(self) -> int:
        return self.components.minute

    @property
    def seconds(self) -> int:
        return self.components.second

    @property
    def weekday(self) -> int:
        """1 (Sunday) through 7 (Saturday)."""
        return self.components.weekday

    @property
    def day_of_month(self) -> int:
        """Occurrence of this weekday within the month (2 for the second Tuesday)."""
        return self.components.weekday_ordinal

    @property
    def day_of_week(self) -> str:
        return self.string_with_format("%A")

    @property
    def nearest_hour(self) -> int:
        """
        Hour of the clock's current time plus 30 minutes.

        Reads the clock rather than this instant; see DESIGN.md.
        """
        return self.engine.components(self.engine.add(self.clock.now(), minutes=30)).hour

    # ── predicates ───────────────────────────────────────────────────────

    def is_equal_to_date_ignoring_time(self, other: DateLike) -> bool:
        return self.components.same_date(self._coerce(other).components)

    def is_today(self) -> bool:
        return self.is_equal_to_date_ignoring_time(self._now())

    def is_tomorrow(self) -> bool:
        return self.is_equal_to_date_ignoring_time(self._now().add_days(1))

    def is_yesterday(self) -> bool:
        return self.is_equal_to_date_ignoring_time(self._now().subtract_days(1))

    def is_same_week_as_date(self, other: DateLike) -> bool:
        # Week numbers repeat every year, so also require less than a week apart.
        other = self._coerce(other)
        if self.components.week_of_year != other.components.week_of_year:
            return False
        return abs(self.difference(Unit.SECOND, other)) < SECONDS_PER_WEEK

    def is_this_week(self) -> bool:
        return self.is_same_week_as_date(self._now())

    def is_next_week(self) -> bool:
        return self.is_same_week_as_date(self._now().add_seconds(SECONDS_PER_WEEK))

    def is_last_week(self) -> bool:
        return self.is_same_week_as_date(self._now().subtract_seconds(SECONDS_PER_WEEK))

    def is_same_month_as_date(self, other: DateLike) -> bool:
        a, b = self.components, self._coerce(other).components
        return (a.year, a.month) == (b.year, b.month)

    def is_this_month(self) -> bool:
        return self.is_same_month_as_date(self._now())

    def is_next_month(self) -> bool:
        return self.is_same_month_as_date(self._now().add_months(1))

    def is_last_month(self) -> bool:
        return self.is_same_month_as_date(self._now().subtract_months(1))

    def is_same_year_as_date(self, other: DateLike) -> bool:
        return self.year == self._coerce(other).year

    def is_this_year(self) -> bool:
        return self.is_same_year_as_date(self._now())

    def is_next_year(self) -> bool:
        return self.year == self._now().year + 1

    def is_last_year(self) -> bool:
        return self.year == self._now().year - 1

    def is_earlier_than_date(self, other: DateLike) -> bool:
        return self < self._coerce(other)

    def is_later_than_date(self, other: DateLike) -> bool:
        return self > self._coerce(other)

    def is_in_future(self) -> bool:
        return self.is_later_than_date(self._now())

    def is_in_past(self) -> bool:
        return self.is_earlier_than_date(self._now())

    def is_weekend(self) -> bool:
        return Weekday(self.weekday).is_weekend

    def is_weekday(self) -> bool:
        return not self.is_weekend()

    # ── calendar arithmetic ──────────────────────────────────────────────

    def add_years(self, years: int) -> "Instant":
        return self._shift(years=years)

    def subtract_years(self, years: int) -> "Instant":
        return self._shift(years=-years)

    def add_months(self, months: int) -> "Instant":
        return self._shift(months=months)

    def subtract_months(self, months: int) -> "Instant":
        return self._shift(months=-months)

    def add_weeks(self, weeks: int) -> "Instant":
        return self._shift(weeks=weeks)

    def subtract_weeks(self, weeks: int) -> "Instant":
        return self._shift(weeks=-weeks)

    def add_days(self, days: int) -> "Instant":
        return self._shift(days=days)

    def subtract_days(self, days: int) -> "Instant":
        return self._shift(days=-days)

    def add_hours(self, hours: int) -> "Instant":
        return self._shift(hours=hours)

    def subtract_hours(self, hours: int) -> "Instant":
        return self._shift(hours=-hours)

    def add_minutes(self, minutes: int) -> "Instant":
        return self._shift(minutes=minutes)

    def subtract_minutes(self, minutes: int) -> "Instant":
        return self._shift(minutes=-minutes)

    def add_seconds(self, seconds: int) -> "Instant":
        return self._shift(seconds=seconds)

    def subtract_seconds(self, seconds: int) -> "Instant":
        return self._shift(seconds=-seconds)

    # ── business days ────────────────────────────────────────────────────

    def nearest_weekday(self, step: int = 1) -> "Instant":
        """Walk ``step`` days at a time until the instant is off the weekend."""
        result = self
        while result.is_weekend():
            result = result.add_days(step)
        return result

    def add_weekdays(self, days: int) -> "Instant":
        """
        Move forward ``days`` business days, skipping Saturdays and Sundays.

        Every full five business days consume a calendar week.  No holiday
        calendar is consulted.
        """
        if days < 0:
            return self.subtract_weekdays(abs(days))
        result = self.nearest_weekday(1).add_days(days // 5 * 7 + days % 5)
        if result.is_weekend():
            result = result.add_days(2)
        return result

    def subtract_weekdays(self, days: int) -> "Instant":
        if days < 0:
            return self.add_weekdays(abs(days))
        result = self.nearest_weekday(-1).subtract_days(days // 5 * 7 + days % 5)
        if result.is_weekend():
            result = result.subtract_days(2)
        return result

    # ── rounding / boundaries ────────────────────────────────────────────
    # These rebuild from components and raise InvalidComponentsError when
    # the wall-clock result is skipped by a DST transition.

    def start_of_day(self) -> "Instant":
        return self._rebuild(self.components, 0, 0, 0)

    def end_of_day(self) -> "Instant":
        return self._rebuild(self.components, 23, 59, 59)

    def to_nearest_minute(self) -> "Instant":
        c = self.components
        return self._rebuild(c, c.hour, c.minute + (1 if c.second > 30 else 0), 0)

    def to_nearest_hour(self) -> "Instant":
        c = self.components
        return self._rebuild(c, c.hour + (1 if c.minute > 30 else 0), 0, 0)

    def start_of_week(self, use_iso8601: bool = False) -> "Instant":
        first = Weekday.MONDAY if use_iso8601 else Weekday.SUNDAY
        day_diff = self.weekday - first
        if day_diff < 0:
            day_diff = 6
        return self.subtract_days(day_diff).start_of_day()

    # ── formatting ───────────────────────────────────────────────────────

    def string_with_date_style(self, date_style: Style, time_style: Style) -> str:
        return self.engine.format(self.value, date_style, time_style)

    def string_with_format(self, pattern: str) -> str:
        return self.engine.format_pattern(self.value, pattern)

    @property
    def short_string(self) -> str:
        return self.string_with_date_style(Style.SHORT, Style.SHORT)

    @property
    def short_date_string(self) -> str:
        return self.string_with_date_style(Style.SHORT, Style.NONE)

    @property
    def short_time_string(self) -> str:
        return self.string_with_date_style(Style.NONE, Style.SHORT)

    @property
    def medium_string(self) -> str:
        return self.string_with_date_style(Style.MEDIUM, Style.MEDIUM)

    @property
    def medium_date_string(self) -> str:
        return self.string_with_date_style(Style.MEDIUM, Style.NONE)

    @property
    def medium_time_string(self) -> str:
        return self.string_with_date_style(Style.NONE, Style.MEDIUM)

    @property
    def long_string(self) -> str:
        return self.string_with_date_style(Style.LONG, Style.LONG)

    @property
    def long_date_string(self) -> str:
        return self.string_with_date_style(Style.LONG, Style.NONE)

    @property
    def long_time_string(self) -> str:
        return self.string_with_date_style(Style.NONE, Style.LONG)

    @property
    def iso8601_string(self) -> str:
        """``2024-03-05T14:30:00+00:00``, independent of the process locale."""
        return self.engine.iso8601(self.value)

    @property
    def iso8601_for_files_string(self) -> str:
        return self.iso8601_string.replace("-", "").replace(":", "")

    # ── differences ──────────────────────────────────────────────────────

    def difference(self, unit: Unit, other: DateLike) -> int:
        """Whole ``unit``s from this instant to ``other``."""
        return self.engine.difference(unit, self.value, self._coerce(other).value)
