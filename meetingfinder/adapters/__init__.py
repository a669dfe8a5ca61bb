"""
Adapters layer - External calendar data sources.
"""

from .calendar_file import CalendarFileSource, parse_minute_of_day

__all__ = ["CalendarFileSource", "parse_minute_of_day"]
