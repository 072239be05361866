"""
Strict, locale-independent parser for HH:mm:ss strings.
"""
import re

from ..domain.entities import TimeOfDay
from ...common.exceptions import InvalidTimeFormat

TIME_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)
EXPECTED_FORMAT = (
    "Expected format is HH:mm:ss and range must be between 00:00:00 and 23:59:59"
)

class FixedFormatTimeParser:
    """
    Parses two-digit hour, minute and second separated by colons.
    """

    def parse(self, text: str) -> TimeOfDay:
        if not isinstance(text, str):
            raise self._error(text)

        match = TIME_PATTERN.fullmatch(text)
        if match is None:
            raise self._error(text)

        hour, minute, second = (int(part) for part in match.groups())
        if hour > 23 or minute > 59 or second > 59:
            raise self._error(text)

        return TimeOfDay(hour=hour, minute=minute, second=second)

    @staticmethod
    def _error(text: object) -> InvalidTimeFormat:
        return InvalidTimeFormat(text, f"{text} is not a valid time. {EXPECTED_FORMAT}")
