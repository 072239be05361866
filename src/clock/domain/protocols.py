"""
Domain protocols for the Berlin clock module.
"""
from typing import Protocol
from .entities import ClockDisplay, TimeOfDay

class ClockFace(Protocol):
    """
    Protocol for a clock face that reads a time into lamp rows.
    """
    def read_time(self, time: TimeOfDay) -> ClockDisplay:
        ...

class TimeParser(Protocol):
    """
    Protocol for turning user text into a validated time.
    Raises InvalidTimeFormat on bad input.
    """
    def parse(self, text: str) -> TimeOfDay:
        ...
