"""
Converts user supplied time strings into a clock face reading.
"""
import os
from typing import Optional

from ..domain.entities import ClockDisplay
from ..domain.protocols import ClockFace, TimeParser
from ..infrastructure.time_parser import FixedFormatTimeParser
from .renderer import BerlinClockRenderer
from ...common.exceptions import InvalidTimeFormat
from ...common.logging import setup_logger

logger = setup_logger(__name__)

class TimeConverter:
    """
    Parses HH:mm:ss text and reads it on a clock face.
    The clock is only consulted once parsing succeeded.
    """

    def __init__(
        self,
        parser: Optional[TimeParser] = None,
        clock: Optional[ClockFace] = None,
        line_separator: str = os.linesep,
    ):
        self.parser = parser or FixedFormatTimeParser()
        self.clock = clock or BerlinClockRenderer()
        self.line_separator = line_separator

    def convert(self, time_to_read: str) -> ClockDisplay:
        try:
            time = self.parser.parse(time_to_read)
        except InvalidTimeFormat as e:
            logger.warning(f"Rejected time input {e.value!r}")
            raise
        return self.clock.read_time(time)

    def convert_time(self, time_to_read: str) -> str:
        """Returns the clock face as text, one row per line."""
        return self.convert(time_to_read).to_text(self.line_separator)
