"""
Domain-specific exception hierarchy for the meeting finder application.
"""


class MeetingFinderError(Exception):
    """Base class for all application-level errors."""


class InvalidTimeRangeError(MeetingFinderError, ValueError):
    """Raised when a time range would not start before it ends."""


class InvalidMeetingRequestError(MeetingFinderError, ValueError):
    """Raised when a meeting request cannot describe a real meeting."""


class CalendarDataError(MeetingFinderError):
    """Raised when calendar data cannot be read or parsed."""
