"""
Logging Configuration - Shared Layer

Structured logging for the Orion client. Library code only calls
``get_logger``; applications embedding the client decide whether to call
``configure_logging`` (or ``update_logging_from_settings``) at startup.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from fiware_orion_client.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _shared_processors() -> List[Processor]:
    """Processors applied to both structlog and foreign (stdlib) records."""
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
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Route structlog events through the standard logging module.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL`` then INFO.
        format_string: Accepted for settings compatibility. Rendering is done
            by structlog, so the stdlib format string is not applied.
        file_path: Optional log file, falls back to ``LOG_FILE_PATH``.
        environment: ``production`` renders JSON lines, anything else renders
            the human-readable console format.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    renderer: Processor
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
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
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from an ``AppSettings``-like object.

    Errors are reported on the stdlib logger and never raised, so a broken
    logging section cannot stop the client from being built.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
