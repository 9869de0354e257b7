"""
Client Settings - Main Layer

Pydantic Settings for building the client from environment variables,
``.env`` files and ``*_FILE`` secrets.
"""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fiware_orion_client.shared import EnumEnvironment, EnumLogLevel
from fiware_orion_client.shared.env import load_secret_file_variables


class OrionSettings(BaseSettings):
    """Orion Context Broker connection settings."""

    base_url: str = Field(
        default="http://localhost:1026", description="Orion Context Broker URL"
    )
    credential: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent on every request, as a JSON object",
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="ORION_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Top-level settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    orion: OrionSettings = Field(default_factory=OrionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """Resolve ``*_FILE`` secrets, then load settings from the environment."""
    load_secret_file_variables()
    return AppSettings()
