"""
Tests for the MeetingFinderService orchestration layer.
"""

from typing import List

from meetingfinder.domain.models import Event, TimeRange
from meetingfinder.services.meeting_finder import MeetingFinderService


class StubEventSource:
    """Minimal stub matching EventSourceProtocol."""

    def __init__(self, events: List[Event]):
        self._events = events
        self.calls = 0

    def get_events(self) -> List[Event]:
        self.calls += 1
        return self._events


def _build_service(events: List[Event]) -> MeetingFinderService:
    return MeetingFinderService(event_source=StubEventSource(events))


EVENTS = [
    Event("Review", TimeRange(660, 720), ["a@example.com"]),
    Event("Standup", TimeRange(540, 555), ["a@example.com", "b@example.com"]),
    Event("Offsite", TimeRange(0, 1440), ["c@example.com"]),
]


def test_find_windows_uses_calendar_data():
    """End-to-end call should yield windows around the attendees' events."""
    source = StubEventSource(EVENTS)
    service = MeetingFinderService(event_source=source)

    windows = service.find_windows(
        attendees=["a@example.com", "b@example.com"],
        duration_minutes=30,
    )

    assert source.calls == 1
    assert windows == [
        TimeRange(0, 540),
        TimeRange(555, 660),
        TimeRange(720, 1440),
    ]


def test_find_windows_with_busy_optional_attendee():
    """An optional attendee who is never free does not block the meeting."""
    service = _build_service(EVENTS)

    windows = service.find_windows(
        attendees=["b@example.com"],
        duration_minutes=60,
        optional_attendees=["c@example.com"],
    )

    assert windows == [TimeRange(0, 540), TimeRange(555, 1440)]


def test_calculate_windows_does_not_touch_the_source():
    source = StubEventSource([])
    service = MeetingFinderService(event_source=source)

    windows = service.calculate_windows(
        events=EVENTS,
        attendees=["c@example.com"],
        duration_minutes=1,
    )

    assert windows == []
    assert source.calls == 0


def test_relevant_events_are_ordered_by_start():
    relevant = MeetingFinderService.relevant_events(EVENTS, ["a@example.com"])

    assert [event.title for event in relevant] == ["Standup", "Review"]


def test_relevant_events_without_attendees():
    assert MeetingFinderService.relevant_events(EVENTS, []) == []
