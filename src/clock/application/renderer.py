"""
Berlin clock face: encodes a time of day as five rows of lamps.
"""
from typing import List

from ..domain.entities import ClockDisplay, Lamp, LampRow, TimeOfDay

HOURS_PER_BLOCK = 5
MINUTES_PER_BLOCK = 5
HOUR_LAMPS = 4
FIVE_MINUTE_LAMPS = 11
SINGLE_MINUTE_LAMPS = 4
QUARTER_MARK = 3  # every third five-minute lamp marks a quarter hour

def _lamps(lamp: Lamp, count: int) -> List[Lamp]:
    return [lamp] * count

def _row(lit: List[Lamp], size: int) -> LampRow:
    return LampRow(tuple(lit + _lamps(Lamp.OFF, size - len(lit))))

class BerlinClockRenderer:
    """
    Stateless renderer for the Berlin clock.

    Expects pre-validated input; out-of-range values trip an assertion.
    """

    def read_time(self, time: TimeOfDay) -> ClockDisplay:
        return self.render(time.hour, time.minute, time.second)

    def render(self, hour: int, minute: int, second: int) -> ClockDisplay:
        assert 0 <= hour <= 23, f"hour out of range: {hour}"
        assert 0 <= minute <= 59, f"minute out of range: {minute}"
        assert 0 <= second <= 59, f"second out of range: {second}"

        hour_blocks, single_hours = divmod(hour, HOURS_PER_BLOCK)
        minute_blocks, single_minutes = divmod(minute, MINUTES_PER_BLOCK)

        return ClockDisplay(
            seconds=self._seconds_row(second),
            five_hours=_row(_lamps(Lamp.RED, hour_blocks), HOUR_LAMPS),
            single_hours=_row(_lamps(Lamp.RED, single_hours), HOUR_LAMPS),
            five_minutes=self._five_minutes_row(minute_blocks),
            single_minutes=_row(_lamps(Lamp.YELLOW, single_minutes), SINGLE_MINUTE_LAMPS),
        )

    @staticmethod
    def _seconds_row(second: int) -> LampRow:
        # Blinks: on for even seconds
        return LampRow((Lamp.YELLOW if second % 2 == 0 else Lamp.OFF,))

    @staticmethod
    def _five_minutes_row(blocks: int) -> LampRow:
        lit = [
            Lamp.RED if index % QUARTER_MARK == 0 else Lamp.YELLOW
            for index in range(1, blocks + 1)
        ]
        return _row(lit, FIVE_MINUTE_LAMPS)

def render(hour: int, minute: int, second: int) -> ClockDisplay:
    """Module-level shortcut for BerlinClockRenderer().render."""
    return _DEFAULT_RENDERER.render(hour, minute, second)

_DEFAULT_RENDERER = BerlinClockRenderer()
