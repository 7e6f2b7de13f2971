"""textmask logging setup."""

from .config import LoggingConfig, get_config, set_config
from .logging import configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "set_config",
]
