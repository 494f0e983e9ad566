"""Tests for weekly schedule normalization."""

from photo_availability.scheduling.normalizer import (
    PlaceholderHours,
    default_schedule_item,
    normalize_weekly_schedule,
)
from photo_availability.schemas.schedule_schema import DayOfWeek

from tests.conftest import make_schedule_item


class TestNormalizeWeeklySchedule:
    def test_empty_schedule_gets_seven_placeholders(self):
        schedule = normalize_weekly_schedule([])
        assert len(schedule) == 7
        assert {item.day_of_week for item in schedule} == set(DayOfWeek)
        assert all(not item.is_available for item in schedule)

    def test_none_is_treated_as_empty(self):
        assert len(normalize_weekly_schedule(None)) == 7

    def test_placeholder_hours(self):
        schedule = normalize_weekly_schedule([])
        assert schedule[0].start_time == "00:00"
        assert schedule[0].end_time == "12:00"

    def test_partial_schedule_keeps_given_days_first(self):
        schedule = normalize_weekly_schedule(
            [make_schedule_item("Wednesday"), make_schedule_item("Monday")]
        )
        assert len(schedule) == 7
        assert schedule[0].day_of_week == DayOfWeek.WEDNESDAY
        assert schedule[1].day_of_week == DayOfWeek.MONDAY
        assert schedule[0].is_available is True
        assert [item.day_of_week for item in schedule[2:]] == [
            DayOfWeek.SUNDAY,
            DayOfWeek.TUESDAY,
            DayOfWeek.THURSDAY,
            DayOfWeek.FRIDAY,
            DayOfWeek.SATURDAY,
        ]

    def test_first_duplicate_wins(self):
        schedule = normalize_weekly_schedule(
            [
                make_schedule_item("Monday", "09:00", "12:00"),
                make_schedule_item("Monday", "13:00", "18:00"),
            ]
        )
        mondays = [item for item in schedule if item.day_of_week == DayOfWeek.MONDAY]
        assert len(mondays) == 1
        assert mondays[0].start_time == "09:00"

    def test_duplicate_day_names_compare_case_insensitively(self):
        schedule = normalize_weekly_schedule(
            [
                {"day_of_week": "monday", "start_time": "08:00", "end_time": "10:00"},
                {"day_of_week": "MONDAY", "start_time": "11:00", "end_time": "15:00"},
            ]
        )
        mondays = [item for item in schedule if item.day_of_week == DayOfWeek.MONDAY]
        assert len(mondays) == 1
        assert mondays[0].start_time == "08:00"

    def test_unknown_day_names_are_dropped(self):
        schedule = normalize_weekly_schedule(
            [{"day_of_week": "Funday", "start_time": "09:00", "end_time": "17:00"}]
        )
        assert len(schedule) == 7
        assert all(not item.is_available for item in schedule)

    def test_malformed_hours_are_dropped(self):
        schedule = normalize_weekly_schedule(
            [{"day_of_week": "Friday", "start_time": "9am", "end_time": "17:00"}]
        )
        friday = next(item for item in schedule if item.day_of_week == DayOfWeek.FRIDAY)
        assert friday.is_available is False

    def test_idempotent(self):
        once = normalize_weekly_schedule(
            [make_schedule_item("Tuesday"), make_schedule_item("Tuesday", "10:00", "11:00")]
        )
        twice = normalize_weekly_schedule(once)
        assert twice == once

    def test_custom_placeholder(self):
        placeholder = PlaceholderHours(start_time="08:00", end_time="09:00", notes="closed")
        schedule = normalize_weekly_schedule([], placeholder)
        assert all(item.start_time == "08:00" for item in schedule)
        assert all(item.notes == "closed" for item in schedule)


class TestDefaultScheduleItem:
    def test_placeholder_is_unavailable(self):
        item = default_schedule_item(DayOfWeek.SATURDAY)
        assert item.day_of_week == DayOfWeek.SATURDAY
        assert item.is_available is False
