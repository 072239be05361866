import pytest
from src.clock.domain.entities import TimeOfDay
from src.common.exceptions import ClockError, InvalidTimeFormat

@pytest.mark.parametrize("text, expected", [
    ("00:00:00", (0, 0, 0)),
    ("13:17:01", (13, 17, 1)),
    ("23:59:59", (23, 59, 59)),
])
def test_parse_valid(parser, text, expected):
    """Checks that well-formed times parse into their fields."""
    time = parser.parse(text)
    assert (time.hour, time.minute, time.second) == expected
    assert str(time) == text

@pytest.mark.parametrize("text", [
    "25:61:00",
    "24:00:00",
    "12:60:00",
    "12:00:60",
    "not-a-time",
    "",
    "1:02:03",
    "01:02",
    "01:02:03:04",
    " 01:02:03",
    "01:02:03\n",
    "01-02-03",
    "١٢:٠٠:٠٠",  # non-ASCII digits
])
def test_parse_invalid(parser, text):
    """Checks that malformed or out-of-range text is rejected with the input attached."""
    with pytest.raises(InvalidTimeFormat) as excinfo:
        parser.parse(text)
    assert excinfo.value.value == text

def test_error_message_names_input_and_format(parser):
    """Checks that the error names the input and the expected format."""
    with pytest.raises(InvalidTimeFormat) as excinfo:
        parser.parse("25:61:00")
    assert str(excinfo.value) == (
        "25:61:00 is not a valid time. Expected format is HH:mm:ss "
        "and range must be between 00:00:00 and 23:59:59"
    )

def test_error_hierarchy(parser):
    """Checks that the parse error is both a ClockError and a ValueError."""
    with pytest.raises(ClockError):
        parser.parse("not-a-time")
    with pytest.raises(ValueError):
        parser.parse("not-a-time")

def test_parse_non_string(parser):
    """Checks that non-string input is rejected."""
    with pytest.raises(InvalidTimeFormat):
        parser.parse(None)

def test_result_is_time_of_day(parser):
    """Checks that parsing returns a TimeOfDay."""
    assert parser.parse("08:09:10") == TimeOfDay(hour=8, minute=9, second=10)
