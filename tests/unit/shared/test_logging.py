from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from fiware_orion_client.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "orion-client.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    get_logger(__name__).info("orion.test.event", entity_id="room1")
    for handler in root.handlers:
        handler.flush()
    assert "orion.test.event" in log_file.read_text(encoding="utf-8")


def test_production_environment_renders_json(tmp_path) -> None:
    log_file = tmp_path / "orion-client.json.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    root = logging.getLogger()
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    assert any(
        isinstance(processor, structlog.processors.JSONRenderer)
        for processor in formatter.processors
    )


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.ERROR


def test_update_logging_from_settings_tolerates_broken_settings() -> None:
    update_logging_from_settings(object())
