"""
Domain models for a single day of calendar time.

Times are integer minutes of the day: 0 is midnight, 1440 is the exclusive
end of the day.
"""

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable, Tuple

from .exceptions import InvalidMeetingRequestError, InvalidTimeRangeError


def _format_minute(minute: int) -> str:
    hours, minutes = divmod(minute, 60)
    return f"{hours:02d}:{minutes:02d}"


def _as_attendee_set(attendees: Iterable[str]) -> FrozenSet[str]:
    # A bare string is one attendee, not a set of characters
    if isinstance(attendees, str):
        return frozenset((attendees,))
    return frozenset(attendees)


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable half-open range of minutes ``[start, end)``.

    Invariant: start must be before end.
    """
    start: int
    end: int

    START_OF_DAY: ClassVar[int] = 0
    END_OF_DAY: ClassVar[int] = 24 * 60 - 1
    WHOLE_DAY: ClassVar["TimeRange"]

    def __post_init__(self):
        if self.start >= self.end:
            raise InvalidTimeRangeError(
                f"Start minute {self.start} must be before end minute {self.end}"
            )

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool) -> "TimeRange":
        """
        Build a range from two boundaries.

        With ``inclusive`` the ``end`` minute itself is part of the range,
        so ``from_start_end(START_OF_DAY, END_OF_DAY, True)`` spans the day.
        """
        return cls(start=start, end=end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        """Build a range of ``duration`` minutes beginning at ``start``."""
        return cls(start=start, end=start + duration)

    def duration(self) -> int:
        """Return the duration in minutes."""
        return self.end - self.start

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range shares at least one minute with another."""
        return self.start < other.end and other.start < self.end

    def contains(self, other: "TimeRange") -> bool:
        """Check if another range lies entirely within this one."""
        return self.start <= other.start and other.end <= self.end

    def contains_minute(self, minute: int) -> bool:
        """Check if a single minute falls inside this range."""
        return self.start <= minute < self.end

    @staticmethod
    def order_by_end(time_range: "TimeRange") -> Tuple[int, int]:
        """Sort key: end ascending, start breaking ties."""
        return time_range.end, time_range.start

    @staticmethod
    def order_by_start(time_range: "TimeRange") -> Tuple[int, int]:
        """Sort key: start ascending, end breaking ties."""
        return time_range.start, time_range.end

    def __str__(self) -> str:
        return f"{_format_minute(self.start)}-{_format_minute(self.end)}"


TimeRange.WHOLE_DAY = TimeRange.from_start_end(
    TimeRange.START_OF_DAY, TimeRange.END_OF_DAY, inclusive=True
)


@dataclass(frozen=True)
class Event:
    """
    An already-scheduled commitment occupying a time range for its attendees.
    """
    title: str
    when: TimeRange
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "attendees", _as_attendee_set(self.attendees))

    def __str__(self) -> str:
        return f"{self.title} ({self.when})"


@dataclass(frozen=True)
class MeetingRequest:
    """
    The meeting being planned: who must attend and for how long.

    Optional attendees are considered only when a window exists that
    suits them as well as the required attendees.
    """
    attendees: FrozenSet[str]
    duration: int
    optional_attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.duration < 0:
            raise InvalidMeetingRequestError(
                f"Meeting duration must not be negative, got {self.duration}"
            )
        object.__setattr__(self, "attendees", _as_attendee_set(self.attendees))
        object.__setattr__(
            self, "optional_attendees", _as_attendee_set(self.optional_attendees)
        )
