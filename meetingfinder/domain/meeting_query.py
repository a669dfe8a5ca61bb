"""
Core business logic for finding the free windows of a meeting.

Pure domain logic without any external dependencies (no API calls, no
database, no I/O).
"""

import logging
from typing import Dict, FrozenSet, Iterable, List

from .models import Event, MeetingRequest, TimeRange

logger = logging.getLogger(__name__)


class MeetingQuery:
    """
    Finds the windows of the day in which a meeting's attendees are all free.

    Algorithm:
    1. Start with a single candidate spanning the whole day
    2. For every event that involves one of the attendees, carve the
       event's time out of each candidate
    3. Keep the candidates long enough for the meeting
    4. Return them ordered by end time
    """

    def query(self, events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
        """
        Find all windows that fit the meeting request.

        Args:
            events: All known events of the day, in any order
            request: The meeting whose attendees must be free

        Returns:
            List of TimeRange objects sorted by end time. Empty when no
            window is long enough.
        """
        events = list(events)

        if not request.optional_attendees:
            return self._find_windows(events, request.attendees, request.duration)

        everyone = request.attendees | request.optional_attendees
        windows = self._find_windows(events, everyone, request.duration)

        # Optional attendees alone are never dropped
        if windows or not request.attendees:
            return windows

        logger.debug(
            "No window suits the optional attendees, falling back to required only"
        )
        return self._find_windows(events, request.attendees, request.duration)

    def _find_windows(
        self,
        events: List[Event],
        attendees: FrozenSet[str],
        duration: int
    ) -> List[TimeRange]:
        candidates: List[TimeRange] = [TimeRange.WHOLE_DAY]
        conflicts: Dict[Event, bool] = {}

        for event in events:
            if not self._has_overlapping_attendees(event, attendees, conflicts):
                continue

            next_candidates: List[TimeRange] = []
            for candidate in candidates:
                next_candidates.extend(
                    self._split_to_available_ranges(candidate, event.when)
                )
            candidates = next_candidates

        windows = [
            candidate for candidate in candidates
            if candidate.duration() >= duration
        ]
        windows.sort(key=TimeRange.order_by_end)

        logger.debug(
            "%d of %d events conflict, %d windows of at least %d minutes",
            sum(conflicts.values()),
            len(events),
            len(windows),
            duration
        )
        return windows

    @staticmethod
    def _has_overlapping_attendees(
        event: Event,
        attendees: FrozenSet[str],
        conflicts: Dict[Event, bool]
    ) -> bool:
        """
        Check whether an event involves any of the attendees.

        The answer is remembered in ``conflicts``, which lives only as long
        as one search.
        """
        if event not in conflicts:
            conflicts[event] = not event.attendees.isdisjoint(attendees)
        return conflicts[event]

    @staticmethod
    def _split_to_available_ranges(
        candidate: TimeRange,
        busy: TimeRange
    ) -> List[TimeRange]:
        """
        Remove the busy time from a candidate range.

        Example:
        Candidate: 09:00 - 17:00
        Busy: 12:00 - 13:00
        Result: [13:00-17:00, 09:00-12:00]
        """
        if not busy.overlaps(candidate):
            return [candidate]

        if busy.contains(candidate):
            return []

        available: List[TimeRange] = []

        if candidate.start < busy.end < candidate.end:
            available.append(TimeRange(start=busy.end, end=candidate.end))

        if candidate.start < busy.start < candidate.end:
            available.append(TimeRange(start=candidate.start, end=busy.start))

        return available
