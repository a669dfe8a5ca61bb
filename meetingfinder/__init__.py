"""
meetingfinder - find the free windows in a day where every attendee can meet.
"""

__version__ = "0.1.0"
