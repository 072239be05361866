"""
Domain module initialization.
"""
from .entities import (
    TimeOfDay,
    Lamp,
    LampRow,
    ClockDisplay
)
from .protocols import (
    ClockFace,
    TimeParser
)
