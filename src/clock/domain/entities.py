"""
Domain entities for the Berlin clock module.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

class TimeOfDay(BaseModel):
    """
    A validated wall-clock time on the 24-hour dial.
    """
    hour: int = Field(..., ge=0, le=23, description="Hour of the day")
    minute: int = Field(..., ge=0, le=59, description="Minute of the hour")
    second: int = Field(..., ge=0, le=59, description="Second of the minute")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

class Lamp(str, Enum):
    """
    State of a single lamp. The value is the printable symbol.
    """
    YELLOW = "Y"
    RED = "R"
    OFF = "O"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class LampRow:
    """
    Ordered, fixed-length sequence of lamps.
    """
    lamps: Tuple[Lamp, ...]

    def __len__(self) -> int:
        return len(self.lamps)

    def __iter__(self):
        return iter(self.lamps)

    def __str__(self) -> str:
        return "".join(lamp.value for lamp in self.lamps)

    def count(self, lamp: Lamp) -> int:
        return self.lamps.count(lamp)

    @property
    def lit_count(self) -> int:
        return len(self.lamps) - self.count(Lamp.OFF)

@dataclass(frozen=True)
class ClockDisplay:
    """
    The five rows of a Berlin clock, top to bottom.
    """
    seconds: LampRow
    five_hours: LampRow
    single_hours: LampRow
    five_minutes: LampRow
    single_minutes: LampRow

    @property
    def rows(self) -> Tuple[LampRow, ...]:
        return (
            self.seconds,
            self.five_hours,
            self.single_hours,
            self.five_minutes,
            self.single_minutes,
        )

    def lines(self) -> Tuple[str, ...]:
        return tuple(str(row) for row in self.rows)

    def to_text(self, line_separator: str = "\n") -> str:
        return line_separator.join(self.lines())
