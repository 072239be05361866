from dataclasses import dataclass, field
from typing import Optional

@dataclass
class DisplayConfig:
    line_separator: Optional[str] = None  # None -> os.linesep

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class ClockConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
