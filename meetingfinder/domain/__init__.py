"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import (
    CalendarDataError,
    InvalidMeetingRequestError,
    InvalidTimeRangeError,
    MeetingFinderError,
)
from .meeting_query import MeetingQuery
from .models import Event, MeetingRequest, TimeRange

__all__ = [
    "CalendarDataError",
    "Event",
    "InvalidMeetingRequestError",
    "InvalidTimeRangeError",
    "MeetingFinderError",
    "MeetingQuery",
    "MeetingRequest",
    "TimeRange",
]
