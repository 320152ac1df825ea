"""
tests/instant/test_instant.py

Covers:
  - Value semantics (equality, ordering, hashing, immutability)
  - Component accessors, including nearest_hour reading the clock
  - Predicates relative to a fixed clock
  - Calendar arithmetic and its round trips
  - Business-day arithmetic (weekend snapping and skipping)
  - Day/week boundaries and rounding, including DST failures
  - Styled, pattern and ISO 8601 formatting
"""

from datetime import datetime, timedelta, timezone

import pytest

from datekit.calendar import CalendarEngine, InvalidComponentsError, Unit
from datekit.clock import FixedClock
from datekit.instant import Instant

# March 2024: Sun 3, Mon 4, Tue 5, Wed 6, Thu 7, Fri 8, Sat 9, Sun 10, Mon 11


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def utc():
    return CalendarEngine("UTC")


@pytest.fixture
def clock():
    """Wednesday 2024-03-06 12:00 UTC."""
    return FixedClock.fixed(year=2024, month=3, day=6, hour=12)


@pytest.fixture
def at(utc, clock):
    def make(*args):
        return Instant(datetime(*args, tzinfo=timezone.utc), utc, clock)
    return make


# ── Value semantics ───────────────────────────────────────────────────────────

class TestValue:

    def test_equality_ignores_engine_and_clock(self, at):
        a = at(2024, 3, 5, 14)
        b = Instant(a.value, CalendarEngine("Asia/Tokyo"))
        assert a == b
        assert hash(a) == hash(b)

    def test_equals_datetime(self, at):
        assert at(2024, 3, 5, 14) == datetime(2024, 3, 5, 14, tzinfo=timezone.utc)

    def test_naive_value_read_in_engine_zone(self, utc):
        assert Instant(datetime(2024, 3, 5, 14), utc).hour == 14

    def test_value_is_localized(self):
        cal = CalendarEngine("Asia/Tokyo")
        moment = Instant(datetime(2024, 3, 5, 14, tzinfo=timezone.utc), cal)
        assert moment.hour == 23
        assert moment.to_datetime().utcoffset() == timedelta(hours=9)

    def test_ordering(self, at):
        early, late = at(2024, 3, 5), at(2024, 3, 6)
        assert early < late
        assert late > early
        assert early <= at(2024, 3, 5)
        assert sorted([late, early]) == [early, late]

    def test_compare_with_datetime(self, at):
        assert at(2024, 3, 5) < datetime(2024, 3, 6, tzinfo=timezone.utc)

    def test_frozen(self, at):
        moment = at(2024, 3, 5)
        with pytest.raises(AttributeError):
            moment.value = datetime(2000, 1, 1)

    def test_transforms_leave_receiver_unchanged(self, at):
        moment = at(2024, 3, 5, 14)
        moment.add_days(3)
        moment.start_of_day()
        assert moment == at(2024, 3, 5, 14)

    def test_transforms_keep_engine_and_clock(self, at, utc, clock):
        moment = at(2024, 3, 5).add_months(2)
        assert moment.engine is utc
        assert moment.clock is clock


# ── Component accessors ───────────────────────────────────────────────────────

class TestAccessors:

    @pytest.fixture
    def moment(self, at):
        # second Tuesday of March
        return at(2024, 3, 12, 14, 30, 45)

    def test_fields(self, moment):
        assert (moment.year, moment.month, moment.day) == (2024, 3, 12)
        assert (moment.hour, moment.minute, moment.seconds) == (14, 30, 45)

    def test_week(self, moment):
        assert moment.week == 11

    def test_weekday(self, moment):
        assert moment.weekday == 3

    def test_day_of_month_is_weekday_ordinal(self, moment):
        assert moment.day_of_month == 2

    def test_day_of_week_name(self, moment):
        assert moment.day_of_week == "Tuesday"

    def test_components(self, moment):
        assert moment.components.week_of_year == 11

    def test_nearest_hour_reads_clock(self, at, clock):
        moment = at(2000, 1, 1, 5, 50)
        assert moment.nearest_hour == 12
        clock.set(datetime(2024, 3, 6, 12, 45))
        assert moment.nearest_hour == 13


# ── Predicates ────────────────────────────────────────────────────────────────

class TestPredicates:

    def test_equal_ignoring_time(self, at):
        assert at(2024, 3, 5, 0, 0).is_equal_to_date_ignoring_time(at(2024, 3, 5, 23, 59))
        assert not at(2024, 3, 5).is_equal_to_date_ignoring_time(at(2024, 4, 5))

    def test_today_tomorrow_yesterday(self, at):
        assert at(2024, 3, 6, 23, 59).is_today()
        assert at(2024, 3, 7, 0, 0).is_tomorrow()
        assert at(2024, 3, 5, 8).is_yesterday()
        assert not at(2024, 3, 7).is_today()

    def test_this_week(self, at):
        assert at(2024, 3, 3).is_this_week()
        assert at(2024, 3, 9, 23).is_this_week()
        assert not at(2024, 3, 10).is_this_week()

    def test_next_and_last_week(self, at):
        assert at(2024, 3, 11).is_next_week()
        assert at(2024, 3, 1).is_last_week()
        assert not at(2024, 3, 6).is_next_week()

    def test_same_week_requires_less_than_a_week_apart(self, at):
        # both are week 1 under Sunday-first numbering
        assert not at(2024, 12, 31).is_same_week_as_date(at(2024, 1, 1))
        assert at(2024, 12, 31).is_same_week_as_date(at(2025, 1, 2))

    def test_same_week_measures_elapsed_time_across_fall_back(self):
        # Sun 00:30 to Sat 23:59 is one US week on the wall clock, but the
        # repeated hour on 2024-11-03 makes it longer than 604800 seconds.
        cal = CalendarEngine("America/New_York")
        sunday = Instant(datetime(2024, 11, 3, 0, 30), cal)
        saturday = Instant(datetime(2024, 11, 9, 23, 59), cal)
        assert sunday.week == saturday.week
        assert not sunday.is_same_week_as_date(saturday)
        assert not saturday.is_same_week_as_date(sunday)
        assert sunday.is_same_week_as_date(Instant(datetime(2024, 11, 9, 22, 59), cal))

    def test_months(self, at):
        assert at(2024, 3, 31).is_this_month()
        assert at(2024, 4, 1).is_next_month()
        assert at(2024, 2, 29).is_last_month()
        assert not at(2023, 3, 6).is_this_month()
        assert at(2024, 3, 1).is_same_month_as_date(at(2024, 3, 31))

    def test_years(self, at):
        assert at(2024, 12, 31).is_this_year()
        assert at(2025, 6, 1).is_next_year()
        assert at(2023, 12, 31).is_last_year()
        assert not at(2026, 1, 1).is_next_year()
        assert at(2024, 1, 1).is_same_year_as_date(at(2024, 12, 31))

    def test_ordering_predicates(self, at):
        assert at(2024, 3, 5).is_earlier_than_date(at(2024, 3, 6))
        assert at(2024, 3, 6).is_later_than_date(at(2024, 3, 5))
        assert not at(2024, 3, 5).is_earlier_than_date(at(2024, 3, 5))
        assert not at(2024, 3, 5).is_later_than_date(at(2024, 3, 5))

    def test_future_and_past(self, at):
        assert at(2024, 3, 6, 12, 0, 1).is_in_future()
        assert at(2024, 3, 6, 11, 59, 59).is_in_past()
        assert not at(2024, 3, 6, 12).is_in_future()
        assert not at(2024, 3, 6, 12).is_in_past()

    def test_weekend(self, at):
        assert at(2024, 3, 9).is_weekend()
        assert at(2024, 3, 10).is_weekend()
        assert not at(2024, 3, 8).is_weekend()

    def test_weekend_and_weekday_are_complementary(self, at):
        days = [at(2024, 3, 1).add_days(i) for i in range(28)]
        assert all(d.is_weekend() != d.is_weekday() for d in days)
        assert sum(d.is_weekend() for d in days) == 8


# ── Calendar arithmetic ───────────────────────────────────────────────────────

class TestArithmetic:

    @pytest.mark.parametrize("n", [-400, -31, -1, 0, 1, 29, 365, 1000])
    def test_add_then_subtract_days_round_trips(self, at, n):
        moment = at(2024, 3, 5, 14, 30, 45)
        assert moment.add_days(n).subtract_days(n) == moment

    def test_years(self, at):
        assert at(2024, 2, 29).add_years(1) == at(2025, 2, 28)
        assert at(2024, 3, 5).subtract_years(4) == at(2020, 3, 5)

    def test_months(self, at):
        assert at(2024, 1, 31).add_months(1) == at(2024, 2, 29)
        assert at(2024, 3, 5).subtract_months(3) == at(2023, 12, 5)

    def test_weeks(self, at):
        assert at(2024, 3, 5).add_weeks(2) == at(2024, 3, 19)
        assert at(2024, 3, 5).subtract_weeks(1) == at(2024, 2, 27)

    def test_days(self, at):
        assert at(2024, 2, 28).add_days(2) == at(2024, 3, 1)
        assert at(2024, 3, 1).subtract_days(1) == at(2024, 2, 29)

    def test_time_units(self, at):
        moment = at(2024, 3, 5, 23, 59, 59)
        assert moment.add_seconds(1) == at(2024, 3, 6)
        assert moment.subtract_seconds(59) == at(2024, 3, 5, 23, 59)
        assert moment.add_minutes(2) == at(2024, 3, 6, 0, 1, 59)
        assert moment.subtract_minutes(60) == at(2024, 3, 5, 22, 59, 59)
        assert moment.add_hours(25) == at(2024, 3, 7, 0, 59, 59)
        assert moment.subtract_hours(24) == at(2024, 3, 4, 23, 59, 59)

    def test_negative_amounts_reverse_direction(self, at):
        assert at(2024, 3, 5).add_days(-1) == at(2024, 3, 5).subtract_days(1)

    def test_difference(self, at):
        assert at(2024, 3, 5).difference(Unit.DAY, at(2024, 3, 12)) == 7


# ── Business days ─────────────────────────────────────────────────────────────

class TestWeekdays:

    def test_monday_plus_five_is_next_monday(self, at):
        assert at(2024, 3, 4, 9).add_weekdays(5) == at(2024, 3, 11, 9)

    def test_friday_plus_one_is_monday(self, at):
        assert at(2024, 3, 8, 9).add_weekdays(1) == at(2024, 3, 11, 9)

    def test_thursday_plus_two_skips_weekend(self, at):
        assert at(2024, 3, 7).add_weekdays(2) == at(2024, 3, 11)

    def test_weekend_start_snaps_forward(self, at):
        assert at(2024, 3, 9).add_weekdays(1) == at(2024, 3, 12)
        assert at(2024, 3, 10).add_weekdays(0) == at(2024, 3, 11)

    def test_two_weeks(self, at):
        assert at(2024, 3, 6).add_weekdays(10) == at(2024, 3, 20)

    def test_negative_add_subtracts(self, at):
        assert at(2024, 3, 4).add_weekdays(-1) == at(2024, 3, 1)

    def test_subtract(self, at):
        assert at(2024, 3, 11).subtract_weekdays(5) == at(2024, 3, 4)
        assert at(2024, 3, 11).subtract_weekdays(1) == at(2024, 3, 8)

    def test_subtract_from_weekend_snaps_backward(self, at):
        assert at(2024, 3, 9).subtract_weekdays(1) == at(2024, 3, 7)
        assert at(2024, 3, 10).subtract_weekdays(0) == at(2024, 3, 8)

    def test_negative_subtract_adds(self, at):
        assert at(2024, 3, 8).subtract_weekdays(-1) == at(2024, 3, 11)

    def test_results_are_never_weekends(self, at):
        for start in range(1, 15):
            for n in range(-12, 13):
                assert at(2024, 3, start).add_weekdays(n).is_weekday()

    def test_nearest_weekday(self, at):
        assert at(2024, 3, 9).nearest_weekday(1) == at(2024, 3, 11)
        assert at(2024, 3, 9).nearest_weekday(-1) == at(2024, 3, 8)
        assert at(2024, 3, 6).nearest_weekday(1) == at(2024, 3, 6)


# ── Boundaries and rounding ───────────────────────────────────────────────────

class TestBoundaries:

    def test_start_of_day(self, at):
        moment = at(2024, 3, 5, 14, 30, 45)
        start = moment.start_of_day()
        assert (start.hour, start.minute, start.seconds) == (0, 0, 0)
        assert start.is_equal_to_date_ignoring_time(moment)

    def test_end_of_day(self, at):
        assert at(2024, 3, 5, 14, 30, 45).end_of_day() == at(2024, 3, 5, 23, 59, 59)

    def test_to_nearest_minute(self, at):
        assert at(2024, 3, 5, 14, 30, 31).to_nearest_minute() == at(2024, 3, 5, 14, 31)
        assert at(2024, 3, 5, 14, 30, 30).to_nearest_minute() == at(2024, 3, 5, 14, 30)
        assert at(2024, 3, 5, 14, 59, 45).to_nearest_minute() == at(2024, 3, 5, 15, 0)

    def test_to_nearest_hour(self, at):
        assert at(2024, 3, 5, 14, 31).to_nearest_hour() == at(2024, 3, 5, 15)
        assert at(2024, 3, 5, 14, 30, 59).to_nearest_hour() == at(2024, 3, 5, 14)
        assert at(2024, 3, 5, 23, 45).to_nearest_hour() == at(2024, 3, 6)

    def test_start_of_week_iso_from_wednesday(self, at):
        assert at(2024, 3, 6, 15, 20).start_of_week(use_iso8601=True) == at(2024, 3, 4)

    def test_start_of_week_sunday_first(self, at):
        assert at(2024, 3, 6, 15, 20).start_of_week() == at(2024, 3, 3)
        assert at(2024, 3, 3, 15, 20).start_of_week() == at(2024, 3, 3)

    def test_start_of_week_iso_from_sunday(self, at):
        assert at(2024, 3, 10, 8).start_of_week(use_iso8601=True) == at(2024, 3, 4)

    def test_start_of_day_in_dst_gap_raises(self):
        # Brazil moved clocks from 00:00 to 01:00 on 2018-11-04
        cal = CalendarEngine("America/Sao_Paulo")
        moment = Instant(datetime(2018, 11, 4, 12), cal)
        with pytest.raises(InvalidComponentsError):
            moment.start_of_day()

    def test_start_of_day_keeps_local_date(self):
        cal = CalendarEngine("America/New_York")
        moment = Instant(datetime(2024, 3, 6, 2, tzinfo=timezone.utc), cal)
        start = moment.start_of_day()
        assert (start.year, start.month, start.day, start.hour) == (2024, 3, 5, 0)


# ── Formatting ────────────────────────────────────────────────────────────────

class TestFormatting:

    @pytest.fixture
    def moment(self, at):
        return at(2024, 3, 5, 14, 30)

    def test_iso8601(self, moment):
        assert moment.iso8601_string == "2024-03-05T14:30:00+00:00"

    def test_iso8601_for_files(self, moment):
        assert moment.iso8601_for_files_string == "20240305T143000+0000"

    def test_iso8601_round_trips_to_the_second(self, utc):
        moment = Instant(datetime(2024, 3, 5, 14, 30, 45, 123456, tzinfo=timezone.utc), utc)
        parsed = Instant.from_iso8601(moment.iso8601_string, engine=utc)
        assert parsed == moment.value.replace(microsecond=0)

    def test_iso8601_round_trip_with_seconds_offset(self):
        cal = CalendarEngine(timezone(timedelta(minutes=19, seconds=32)))
        moment = Instant(datetime(1930, 6, 1, 12, tzinfo=timezone.utc), cal)
        assert moment.iso8601_string == "1930-06-01T12:19:32+00:19:32"
        assert moment.iso8601_for_files_string == "19300601T121932+001932"
        assert Instant.from_iso8601(moment.iso8601_string, engine=cal) == moment

    def test_iso8601_round_trip_with_offset(self):
        cal = CalendarEngine("America/New_York")
        moment = Instant(datetime(2024, 7, 1, 9, 15, 0), cal)
        assert moment.iso8601_string == "2024-07-01T09:15:00-04:00"
        assert Instant.from_iso8601(moment.iso8601_string, engine=cal) == moment

    def test_styles(self, moment):
        assert moment.short_date_string == "03/05/24"
        assert moment.short_time_string == "02:30 PM"
        assert moment.short_string == "03/05/24, 02:30 PM"
        assert moment.medium_date_string == "Mar 05, 2024"
        assert moment.medium_time_string == "02:30:00 PM"
        assert moment.medium_string == "Mar 05, 2024, 02:30:00 PM"
        assert moment.long_date_string == "March 05, 2024"
        assert moment.long_time_string == "02:30:00 PM UTC"
        assert moment.long_string == "March 05, 2024 at 02:30:00 PM UTC"

    def test_string_with_format(self, moment):
        assert moment.string_with_format("%d.%m.%Y %H:%M") == "05.03.2024 14:30"
