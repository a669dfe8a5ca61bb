"""
Calendar source that reads one day of events from a JSON file.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from dateutil import parser as dateparser

from ..domain.exceptions import CalendarDataError
from ..domain.models import Event, TimeRange

logger = logging.getLogger(__name__)

END_OF_DAY_LABEL = "24:00"
CLOCK_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}")


def parse_minute_of_day(value: Any) -> int:
    """
    Convert a clock value into a minute of the day.

    Accepts an integer number of minutes or an ``HH:MM`` string.
    ``"24:00"`` denotes the exclusive end of the day.

    Raises:
        ValueError: If the value is not a valid time of day
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a time of day: {value!r}")

    if isinstance(value, int):
        if not TimeRange.START_OF_DAY <= value <= TimeRange.END_OF_DAY + 1:
            raise ValueError(f"Minute {value} is outside of the day")
        return value

    if not isinstance(value, str):
        raise ValueError(f"Not a time of day: {value!r}")

    value = value.strip()
    # Plain clock times only: no dates, seconds or offsets
    if not CLOCK_PATTERN.fullmatch(value):
        raise ValueError(f"Not an HH:MM time of day: {value!r}")

    if value == END_OF_DAY_LABEL:
        return TimeRange.END_OF_DAY + 1

    parsed = dateparser.parse(value)
    return parsed.hour * 60 + parsed.minute


class CalendarFileSource:
    """
    Loads events from a JSON calendar file.

    The file contains either a list of events or an object with an
    ``events`` list. Every event looks like::

        {"title": "Standup", "start": "09:00", "end": "09:15",
         "attendees": ["alice@example.com", "bob@example.com"]}
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get_events(self) -> List[Event]:
        """
        Read and validate every event in the file.

        Raises:
            FileNotFoundError: If the calendar file doesn't exist
            CalendarDataError: If the file or one of its events is malformed
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Calendar file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise CalendarDataError(f"Invalid JSON in {self.path}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("events", [])

        if not isinstance(data, list):
            raise CalendarDataError(
                f"{self.path} must contain a list of events or an 'events' list."
            )

        events = [self._parse_event(index, raw) for index, raw in enumerate(data)]
        logger.debug("Loaded %d events from %s", len(events), self.path)
        return events

    def _parse_event(self, index: int, raw: Dict[str, Any]) -> Event:
        if not isinstance(raw, dict):
            raise CalendarDataError(f"Event #{index} in {self.path} is not an object")

        try:
            start = parse_minute_of_day(raw["start"])
            end = parse_minute_of_day(raw["end"])
            when = TimeRange(start=start, end=end)
        except KeyError as exc:
            raise CalendarDataError(
                f"Event #{index} in {self.path} is missing {exc.args[0]!r}"
            ) from exc
        except (ValueError, OverflowError) as exc:
            raise CalendarDataError(f"Event #{index} in {self.path}: {exc}") from exc

        attendees = raw.get("attendees", [])
        if not isinstance(attendees, list):
            raise CalendarDataError(
                f"Event #{index} in {self.path}: attendees must be a list"
            )

        return Event(
            title=str(raw.get("title", f"Event #{index}")),
            when=when,
            attendees=frozenset(str(attendee).lower() for attendee in attendees),
        )
