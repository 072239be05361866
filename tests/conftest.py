import pytest
from src.clock.application.renderer import BerlinClockRenderer
from src.clock.application.converter import TimeConverter
from src.clock.infrastructure.time_parser import FixedFormatTimeParser

@pytest.fixture
def renderer():
    return BerlinClockRenderer()

@pytest.fixture
def parser():
    return FixedFormatTimeParser()

@pytest.fixture
def converter():
    return TimeConverter(line_separator="\n")
