"""Tests for resolving the effective working window of a date."""

from datetime import datetime

from photo_availability.scheduling.normalizer import normalize_weekly_schedule
from photo_availability.scheduling.resolver import (
    Unavailable,
    WorkingWindow,
    find_override,
    resolve_working_window,
)
from photo_availability.schemas.schedule_schema import CustomHours, DateOverride

from tests.conftest import MONDAY, SUNDAY_BEFORE, TUESDAY, at, make_schedule_item


class TestWeeklyResolution:
    def test_weekday_entry_used_without_override(self):
        result = resolve_working_window([make_schedule_item("Monday")], [], MONDAY)
        assert result == WorkingWindow(start=at(MONDAY, "09:00"), end=at(MONDAY, "17:00"))

    def test_unavailable_weekday(self):
        schedule = [make_schedule_item("Monday", available=False)]
        assert isinstance(resolve_working_window(schedule, [], MONDAY), Unavailable)

    def test_missing_weekday_entry(self):
        schedule = [make_schedule_item("Monday")]
        assert isinstance(resolve_working_window(schedule, [], TUESDAY), Unavailable)

    def test_empty_schedule(self):
        assert isinstance(resolve_working_window([], None, MONDAY), Unavailable)

    def test_normalized_placeholder_days_are_unavailable(self):
        schedule = normalize_weekly_schedule([make_schedule_item("Monday")])
        assert isinstance(resolve_working_window(schedule, [], SUNDAY_BEFORE), Unavailable)

    def test_end_of_day_maps_to_next_midnight(self):
        schedule = [make_schedule_item("Monday", "20:00", "24:00")]
        result = resolve_working_window(schedule, [], MONDAY)
        assert result.end == datetime(2025, 3, 18, 0, 0)

    def test_datetime_target_uses_calendar_day(self):
        result = resolve_working_window(
            [make_schedule_item("Monday")], [], datetime(2025, 3, 17, 15, 45)
        )
        assert result.start == at(MONDAY, "09:00")


class TestOverrides:
    def test_unavailable_override_beats_weekly_schedule(self):
        overrides = [DateOverride(date=MONDAY, is_available=False, reason="Vacation")]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, MONDAY)
        assert result == Unavailable(reason="Vacation")

    def test_unavailable_override_without_reason(self):
        overrides = [DateOverride(date=MONDAY, is_available=False)]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, MONDAY)
        assert isinstance(result, Unavailable)

    def test_custom_hours_replace_weekly_hours(self):
        overrides = [
            DateOverride(
                date=MONDAY,
                is_available=True,
                custom_hours=CustomHours(start_time="06:00", end_time="10:00"),
            )
        ]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, MONDAY)
        assert result == WorkingWindow(start=at(MONDAY, "06:00"), end=at(MONDAY, "10:00"))

    def test_custom_hours_without_weekly_entry(self):
        overrides = [
            DateOverride(
                date=TUESDAY,
                is_available=True,
                custom_hours=CustomHours(start_time="10:00", end_time="12:00"),
                reason="Overtime",
            )
        ]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, TUESDAY)
        assert result == WorkingWindow(start=at(TUESDAY, "10:00"), end=at(TUESDAY, "12:00"))

    def test_custom_hours_override_an_unavailable_weekday(self):
        overrides = [
            DateOverride(
                date=MONDAY,
                is_available=True,
                custom_hours=CustomHours(start_time="10:00", end_time="12:00"),
            )
        ]
        schedule = [make_schedule_item("Monday", available=False)]
        assert isinstance(resolve_working_window(schedule, overrides, MONDAY), WorkingWindow)

    def test_available_override_without_hours_falls_back_to_weekly(self):
        overrides = [DateOverride(date=MONDAY, is_available=True)]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, MONDAY)
        assert result.start == at(MONDAY, "09:00")

    def test_available_override_without_hours_on_unavailable_weekday(self):
        overrides = [DateOverride(date=MONDAY, is_available=True)]
        schedule = [make_schedule_item("Monday", available=False)]
        assert isinstance(resolve_working_window(schedule, overrides, MONDAY), Unavailable)

    def test_override_for_other_date_ignored(self):
        overrides = [DateOverride(date=TUESDAY, is_available=False)]
        result = resolve_working_window([make_schedule_item("Monday")], overrides, MONDAY)
        assert isinstance(result, WorkingWindow)


class TestFindOverride:
    def test_matches_by_calendar_day_not_timestamp(self):
        override = DateOverride(date=datetime(2025, 3, 17, 23, 30), is_available=False)
        assert find_override([override], MONDAY) is override

    def test_first_match_wins(self):
        first = DateOverride(date=MONDAY, is_available=False, reason="first")
        second = DateOverride(date=MONDAY, is_available=True, reason="second")
        assert find_override([first, second], MONDAY) is first

    def test_no_overrides(self):
        assert find_override(None, MONDAY) is None
