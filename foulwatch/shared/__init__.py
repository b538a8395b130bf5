"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every layer. It must not
depend on Infrastructure or Frameworks.
"""

from .consts import (
    HEAT_EXCHANGER_PREFIX,
    HISTORIAN_DEPENDENCY,
    SERVICE_NAME,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "SERVICE_NAME",
    "HEAT_EXCHANGER_PREFIX",
    "HISTORIAN_DEPENDENCY",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
