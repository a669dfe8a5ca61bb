"""
Tests for the JSON calendar source.
"""

import json

import pytest

from meetingfinder.adapters.calendar_file import CalendarFileSource, parse_minute_of_day
from meetingfinder.domain.exceptions import CalendarDataError
from meetingfinder.domain.models import Event, TimeRange


def _write_calendar(tmp_path, data):
    path = tmp_path / "calendar.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseMinuteOfDay:
    """Tests for clock value parsing."""

    def test_clock_strings(self):
        assert parse_minute_of_day("00:00") == 0
        assert parse_minute_of_day("09:30") == 570
        assert parse_minute_of_day("23:59") == 1439

    def test_end_of_day(self):
        assert parse_minute_of_day("24:00") == 1440

    def test_integer_minutes(self):
        assert parse_minute_of_day(600) == 600
        assert parse_minute_of_day(1440) == 1440

    @pytest.mark.parametrize("value", [
        -1, 1441, True, None, 9.5,
        "noon", "25:00", "09:75",
        "09:00:59",
        "09:00 +05:00",
        "09:00Z",
        "Monday 09:00",
        "2031-05-05 09:00",
        "2031-05-05T09:00",
    ])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            parse_minute_of_day(value)

    def test_single_digit_hour(self):
        assert parse_minute_of_day("9:05") == 545


class TestCalendarFileSource:
    """Tests for CalendarFileSource."""

    def test_load_event_list(self, tmp_path):
        path = _write_calendar(tmp_path, [
            {"title": "Standup", "start": "09:00", "end": "09:15",
             "attendees": ["Alice@Example.com", "bob@example.com"]},
            {"start": 720, "end": "24:00", "attendees": []},
        ])

        events = CalendarFileSource(path).get_events()

        assert events == [
            Event("Standup", TimeRange(540, 555), ["alice@example.com", "bob@example.com"]),
            Event("Event #1", TimeRange(720, 1440), []),
        ]

    def test_load_events_object(self, tmp_path):
        path = _write_calendar(tmp_path, {"events": [
            {"title": "Lunch", "start": "12:00", "end": "13:00", "attendees": ["a@example.com"]},
        ]})

        events = CalendarFileSource(path).get_events()

        assert len(events) == 1
        assert events[0].when == TimeRange(720, 780)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Calendar file not found"):
            CalendarFileSource(tmp_path / "missing.json").get_events()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "calendar.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CalendarDataError, match="Invalid JSON"):
            CalendarFileSource(path).get_events()

    def test_root_must_be_list(self, tmp_path):
        path = _write_calendar(tmp_path, {"events": "none"})

        with pytest.raises(CalendarDataError, match="must contain a list of events"):
            CalendarFileSource(path).get_events()

    def test_missing_field(self, tmp_path):
        path = _write_calendar(tmp_path, [{"start": "09:00", "attendees": []}])

        with pytest.raises(CalendarDataError, match="Event #0 .* missing 'end'"):
            CalendarFileSource(path).get_events()

    def test_event_ending_before_it_starts(self, tmp_path):
        path = _write_calendar(tmp_path, [
            {"start": "09:00", "end": "10:00", "attendees": []},
            {"start": "11:00", "end": "10:00", "attendees": []},
        ])

        with pytest.raises(CalendarDataError, match="Event #1"):
            CalendarFileSource(path).get_events()

    def test_times_with_seconds_are_rejected(self, tmp_path):
        path = _write_calendar(tmp_path, [
            {"start": "09:00:10", "end": "09:00:50", "attendees": []},
        ])

        with pytest.raises(CalendarDataError, match="Not an HH:MM time of day"):
            CalendarFileSource(path).get_events()

    def test_attendees_must_be_list(self, tmp_path):
        path = _write_calendar(tmp_path, [{"start": "09:00", "end": "10:00", "attendees": "a"}])

        with pytest.raises(CalendarDataError, match="attendees must be a list"):
            CalendarFileSource(path).get_events()

    def test_event_must_be_object(self, tmp_path):
        path = _write_calendar(tmp_path, ["09:00-10:00"])

        with pytest.raises(CalendarDataError, match="is not an object"):
            CalendarFileSource(path).get_events()
