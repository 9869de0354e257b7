"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the client.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, log levels, header names)
- Configuring structured logging
- Serving as a common place for definitions that do not belong
  exclusively to Domain or Infrastructure
"""

from .consts import (
    FIWARE_SERVICE_HEADER,
    FIWARE_SERVICE_PATH_HEADER,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "FIWARE_SERVICE_HEADER",
    "FIWARE_SERVICE_PATH_HEADER",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
