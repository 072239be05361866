from .renderer import BerlinClockRenderer, render
from .converter import TimeConverter
