from .time_parser import FixedFormatTimeParser
