"""
Logging Configuration - Shared Layer

Routes stdlib logging and structlog through a single ProcessorFormatter so
that health probes emit structured, event-style records.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from healthmesh.shared.consts import EnumEnvironment, EnumLogFormat


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
    log_format: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog.

    Called once at import of the application module with environment
    defaults, then again through :func:`update_logging_from_settings`
    when the settings are available.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL`` then ``INFO``.
        file_path: Optional log file; falls back to ``LOG_FILE_PATH``.
        environment: Production renders JSON, anything else the console view.
        log_format: ``json`` or ``console``; overrides the environment choice.
            Falls back to ``LOG_FORMAT``.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    renderer_name = (log_format or os.environ.get("LOG_FORMAT") or "").lower()
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    if not renderer_name:
        renderer_name = (
            EnumLogFormat.JSON.value
            if environment.lower() == EnumEnvironment.PRODUCTION
            else EnumLogFormat.CONSOLE.value
        )

    renderer: Processor
    if renderer_name == EnumLogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_shared_processors(),
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.info(f"Logging configured with level: {log_level}")


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from a fully loaded settings object."""
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        log_format = getattr(settings.logging, "format", None)
        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
            log_format=getattr(log_format, "value", log_format),
        )
    except (AttributeError, OSError) as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
