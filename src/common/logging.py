import logging
import time
from functools import wraps
from typing import Callable, Optional, Union

from .exceptions import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = "src"

def resolve_level(level: Union[int, str]) -> int:
    """
    Maps a level name such as "debug" or a numeric level to its logging constant.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown logging level: {level}")
    return resolved

def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Returns a module logger. Without an explicit level it inherits the
    level set by configure_logging on the package logger.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(resolve_level(level))
    return logger

def configure_logging(level: Union[int, str] = logging.INFO, add_handler: bool = True) -> logging.Logger:
    """
    Sets the level of every logger under the package.

    A stream handler is attached only when nothing handles the root logger
    yet; under Hydra the job logging handlers already do.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))
    if add_handler and not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

def log_execution_time(logger: logging.Logger):
    """
    Decorator to measure and log execution time of a function.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"{func.__name__} executed in {time.perf_counter() - start:.6f}s")
            return result
        return wrapper
    return decorator
