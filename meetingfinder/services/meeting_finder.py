"""
Application service for finding shared meeting windows.

The service loads the day's events via a calendar source adapter and
delegates the actual availability search to the domain-level
``MeetingQuery``. The calendar dependency is a simple protocol so it can
be replaced by a stub in tests.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence

from ..domain.meeting_query import MeetingQuery
from ..domain.models import Event, MeetingRequest, TimeRange


class EventSourceProtocol(Protocol):
    """Protocol describing the calendar source behaviour needed by the service."""

    def get_events(self) -> List[Event]:
        """Return every known event of the day."""


class MeetingFinderService:
    """
    Orchestrates event loading and the availability search.
    """

    def __init__(
        self,
        event_source: EventSourceProtocol,
        meeting_query: MeetingQuery | None = None,
    ) -> None:
        self._event_source = event_source
        self._meeting_query = meeting_query or MeetingQuery()

    def find_windows(
        self,
        *,
        attendees: Sequence[str],
        duration_minutes: int,
        optional_attendees: Sequence[str] = (),
    ) -> List[TimeRange]:
        """
        Load the day's events and return the windows that fit the meeting.
        """
        return self.calculate_windows(
            events=self.fetch_events(),
            attendees=attendees,
            duration_minutes=duration_minutes,
            optional_attendees=optional_attendees,
        )

    def fetch_events(self) -> List[Event]:
        """Fetch the day's events from the calendar source."""
        return list(self._event_source.get_events())

    def calculate_windows(
        self,
        *,
        events: Iterable[Event],
        attendees: Sequence[str],
        duration_minutes: int,
        optional_attendees: Sequence[str] = (),
    ) -> List[TimeRange]:
        """Build the meeting request and run the availability search."""
        request = MeetingRequest(
            attendees=frozenset(attendees),
            duration=duration_minutes,
            optional_attendees=frozenset(optional_attendees),
        )
        return self._meeting_query.query(events, request)

    @staticmethod
    def relevant_events(events: Iterable[Event], attendees: Iterable[str]) -> List[Event]:
        """
        Select the events that involve any of the attendees, ordered by start.
        """
        wanted = frozenset(attendees)
        relevant = [event for event in events if not event.attendees.isdisjoint(wanted)]
        return sorted(relevant, key=lambda event: TimeRange.order_by_start(event.when))
