"""
Dependency container injection module - Main Layer

Settings-driven composition root for applications that configure the Orion
client from the environment rather than calling ``create_client`` directly.
"""

from dependency_injector import containers, providers

from fiware_orion_client.shared import get_logger, update_logging_from_settings

from .client import create_client
from .config import AppSettings

logger = get_logger(__name__)


class OrionClientContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    config = providers.Configuration()

    orion_client = providers.Singleton(
        create_client,
        base_url=config.orion.base_url,
        credential=config.orion.credential,
        timeout=config.orion.timeout,
    )


# -------------------------
# Global Container Instance
# -------------------------
_container: OrionClientContainer | None = None


def init_container(settings: AppSettings) -> OrionClientContainer:
    """Initialize the global container and apply the logging settings."""

    global _container

    update_logging_from_settings(settings)

    container = OrionClientContainer()
    container.config.from_pydantic(settings)
    _container = container

    logger.info("container.initialized", orion_url=settings.orion.base_url)
    return container


def get_container() -> OrionClientContainer:
    """Get the initialized global container."""

    if _container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _container
