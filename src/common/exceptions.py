class ClockError(Exception):
    """Base exception for all clock module errors."""
    pass

class InvalidTimeFormat(ClockError, ValueError):
    """Raised when a time string is not HH:mm:ss or is out of the 24-hour range."""

    def __init__(self, value: object, message: str):
        super().__init__(message)
        self.value = value

class ConfigurationError(ClockError):
    """Raised when configuration is invalid."""
    pass
