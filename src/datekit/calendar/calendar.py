from __future__ import annotations

import logging
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple, Union

from dateutil import tz as _tz
from dateutil.relativedelta import relativedelta

from ._exceptions import (
    CalendarError,
    InvalidComponentsError,
    ParseError,
    UnknownTimeZoneError,
)
from .components import ComponentSet, Style, Unit, Weekday

logger = logging.getLogger(__name__)

TzLike = Union[str, tzinfo, None]

_ONE_MICROSECOND = timedelta(microseconds=1)

_UNIT_SPAN: dict[Unit, timedelta] = {
    Unit.SECOND: timedelta(seconds=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.DAY: timedelta(days=1),
    Unit.WEEK: timedelta(weeks=1),
}

# Exactly the shape produced by CalendarEngine.iso8601(); historical
# local-mean-time offsets carry seconds.
_ISO8601_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}(?::\d{2})?")


def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """divmod() rounding the quotient toward zero; the remainder takes the sign of ``a``."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def resolve_timezone(value: TzLike) -> tzinfo:
    if value is None:
        return _tz.tzlocal()
    if isinstance(value, tzinfo):
        return value
    zone = _tz.gettz(value) if value else None
    if zone is None:
        raise UnknownTimeZoneError(f"Unknown time zone {value!r}.")
    return zone


class CalendarEngine:
    """
    Gregorian calendar bound to one time zone.

    Extracts calendar components, adds signed component deltas, measures
    single-unit differences, rebuilds instants from components and renders
    them as text.  Day and larger units follow the wall clock; hours,
    minutes and seconds are elapsed time.
    """

    _DEFAULT_FIRST_WEEKDAY: Weekday = Weekday.SUNDAY
    _DEFAULT_MIN_DAYS: int = 1

    _DATE_PATTERNS: dict[Style, str] = {
        Style.NONE: "",
        Style.SHORT: "%m/%d/%y",
        Style.MEDIUM: "%b %d, %Y",
        Style.LONG: "%B %d, %Y",
    }
    _TIME_PATTERNS: dict[Style, str] = {
        Style.NONE: "",
        Style.SHORT: "%I:%M %p",
        Style.MEDIUM: "%I:%M:%S %p",
        Style.LONG: "%I:%M:%S %p %Z",
    }

    def __init__(
        self,
        tz: TzLike = None,
        first_weekday: Optional[int] = None,
        min_days_in_first_week: Optional[int] = None,
    ) -> None:
        if first_weekday is None:
            first_weekday = self._DEFAULT_FIRST_WEEKDAY
        if min_days_in_first_week is None:
            min_days_in_first_week = self._DEFAULT_MIN_DAYS
        if not 1 <= first_weekday <= 7:
            raise CalendarError(f"First weekday must be in 1..7; got {first_weekday}.")
        if not 1 <= min_days_in_first_week <= 7:
            raise CalendarError(
                f"Minimum days in first week must be in 1..7; got {min_days_in_first_week}."
            )

        self._tz: tzinfo = resolve_timezone(tz)
        self._tzname: str = tz if isinstance(tz, str) else repr(self._tz)
        self._first_weekday: Weekday = Weekday(first_weekday)
        self._min_days: int = int(min_days_in_first_week)

    @classmethod
    def iso8601(cls, tz: TzLike = None) -> "CalendarEngine":
        """Monday-first weeks, week 1 holds the first Thursday (ISO 8601)."""
        return cls(tz, first_weekday=Weekday.MONDAY, min_days_in_first_week=4)

    # ── zone handling ────────────────────────────────────────────────────

    def localize(self, value: datetime) -> datetime:
        """Aware datetimes are converted, naive ones are read as local wall time."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self._tz)
        return value.astimezone(self._tz)

    # ── components ───────────────────────────────────────────────────────

    def components(self, value: datetime) -> ComponentSet:
        local = self.localize(value)
        return ComponentSet(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            week_of_year=self._week_of_year(local.date()),
            weekday=int(Weekday.of(local)),
            weekday_ordinal=(local.day - 1) // 7 + 1,
        )

    def _week_index(self, day: date) -> int:
        return (Weekday.of(day) - self._first_weekday) % 7

    def _first_week_start(self, year: int) -> date:
        jan1 = date(year, 1, 1)
        offset = self._week_index(jan1)
        start = jan1 - timedelta(days=offset)
        if 7 - offset < self._min_days:
            start += timedelta(days=7)
        return start

    def _week_of_year(self, day: date) -> int:
        if not MINYEAR < day.year < MAXYEAR:
            # neighbouring years are not representable; count from Jan 1
            jan1 = date(day.year, 1, 1)
            return ((day - jan1).days + self._week_index(jan1)) // 7 + 1

        start = self._first_week_start(day.year)
        if day < start:
            start = self._first_week_start(day.year - 1)
        elif day >= self._first_week_start(day.year + 1):
            return 1
        return (day - start).days // 7 + 1

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(
        self,
        value: datetime,
        *,
        seconds: int = 0,
        minutes: int = 0,
        hours: int = 0,
        days: int = 0,
        weeks: int = 0,
        months: int = 0,
        years: int = 0,
    ) -> datetime:
        shifted = self.localize(value)

        if days or weeks or months or years:
            shifted = shifted + relativedelta(
                years=years, months=months, weeks=weeks, days=days
            )
            if not _tz.datetime_exists(shifted):
                logger.debug("%s falls in a DST gap; moving forward", shifted)
                shifted = _tz.resolve_imaginary(shifted)

        if seconds or minutes or hours:
            elapsed = timedelta(hours=hours, minutes=minutes, seconds=seconds)
            shifted = (shifted.astimezone(timezone.utc) + elapsed).astimezone(self._tz)

        return shifted

    def difference(self, unit: Unit, start: datetime, end: datetime) -> int:
        """Whole ``unit``s from ``start`` to ``end``, truncated toward zero."""
        a = self.localize(start)
        b = self.localize(end)

        if unit in (Unit.SECOND, Unit.MINUTE, Unit.HOUR):
            delta = b.astimezone(timezone.utc) - a.astimezone(timezone.utc)
            return trunc_divmod(delta // _ONE_MICROSECOND, _UNIT_SPAN[unit] // _ONE_MICROSECOND)[0]

        wall_a = a.replace(tzinfo=None)
        wall_b = b.replace(tzinfo=None)

        if unit in (Unit.DAY, Unit.WEEK):
            delta = wall_b - wall_a
            return trunc_divmod(delta // _ONE_MICROSECOND, _UNIT_SPAN[unit] // _ONE_MICROSECOND)[0]

        rd = relativedelta(wall_b, wall_a)
        if unit is Unit.MONTH:
            return rd.years * 12 + rd.months
        return rd.years

    # ── reconstruction ───────────────────────────────────────────────────

    def from_components(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> datetime:
        """
        Build an aware datetime from wall-clock fields.

        Hour, minute and second may overflow (minute=60 rolls into the next
        hour).  Raises InvalidComponentsError for impossible dates and for
        times skipped by a DST transition.
        """
        try:
            midnight = datetime(year, month, day, tzinfo=self._tz)
            wall = midnight + timedelta(hours=hour, minutes=minute, seconds=second)
        except (ValueError, OverflowError) as exc:
            logger.debug("rejected components %s", (year, month, day, hour, minute, second))
            raise InvalidComponentsError(
                f"Invalid calendar components {year:04d}-{month:02d}-{day:02d} "
                f"{hour:02d}:{minute:02d}:{second:02d}: {exc}"
            ) from exc

        if not _tz.datetime_exists(wall):
            logger.debug("rejected non-existent wall time %s", wall)
            raise InvalidComponentsError(
                f"{wall.replace(tzinfo=None).isoformat()} does not exist in {self.tzname}."
            )
        return wall

    # ── formatting ───────────────────────────────────────────────────────

    def format(self, value: datetime, date_style: Style, time_style: Style) -> str:
        patterns = [
            p for p in (self._DATE_PATTERNS[date_style], self._TIME_PATTERNS[time_style]) if p
        ]
        separator = " at " if date_style is Style.LONG else ", "
        return self.localize(value).strftime(separator.join(patterns))

    def format_pattern(self, value: datetime, pattern: str) -> str:
        return self.localize(value).strftime(pattern)

    def iso8601(self, value: datetime) -> str:
        # isoformat() never consults the locale
        return self.localize(value).isoformat(timespec="seconds")

    def parse_iso8601(self, text: str) -> datetime:
        if not _ISO8601_RE.fullmatch(text):
            raise ParseError(f"Not an ISO 8601 timestamp: {text!r}.")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ParseError(f"Not an ISO 8601 timestamp: {text!r}.") from exc
        return parsed.astimezone(self._tz)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def tz(self) -> tzinfo:
        return self._tz

    @property
    def tzname(self) -> str:
        return self._tzname

    @property
    def first_weekday(self) -> Weekday:
        return self._first_weekday

    @property
    def min_days_in_first_week(self) -> int:
        return self._min_days

    def __repr__(self) -> str:
        return (
            f"CalendarEngine(tz={self.tzname!r}, "
            f"first_weekday={self._first_weekday.name}, "
            f"min_days_in_first_week={self._min_days})"
        )


_default_engine: Optional[CalendarEngine] = None


def default_engine() -> CalendarEngine:
    """Process-wide engine in the local time zone, created on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CalendarEngine()
    return _default_engine


def set_default_engine(engine: Optional[CalendarEngine]) -> None:
    """Replace the process-wide engine; ``None`` resets it to the local-zone default."""
    global _default_engine
    _default_engine = engine
