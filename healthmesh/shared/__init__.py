"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used across every layer.
It must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    DEFAULT_MAX_DEPTH,
    HEALTH_DEPTH_HEADER,
    EnumEnvironment,
    EnumLogFormat,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "HEALTH_DEPTH_HEADER",
    "EnumEnvironment",
    "EnumLogFormat",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
