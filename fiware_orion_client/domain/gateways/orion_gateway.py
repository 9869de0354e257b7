"""Orion Context Broker gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from fiware_orion_client.domain.entities.result import OrionResult


class IOrionGateway(ABC):
    """
    Entity operations of the Orion NGSI v2 API.

    Reads return the decoded JSON body, or None when the call failed.
    Writes return an ``OrionResult``; transport failures are never raised.
    """

    @abstractmethod
    def list_entities(
        self, fiware_service: str, fiware_service_path: str
    ) -> Optional[Any]:
        """Return every entity visible in the given service and service path."""
        raise NotImplementedError

    @abstractmethod
    def get_entity(
        self, entity_id: str, fiware_service: str, fiware_service_path: str
    ) -> Optional[Any]:
        """Return a single entity by id."""
        raise NotImplementedError

    @abstractmethod
    def create_entity(
        self,
        entity: Dict[str, Any],
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        """Create an entity from its full NGSI representation."""
        raise NotImplementedError

    @abstractmethod
    def update_entity(
        self,
        entity_id: str,
        attributes: Dict[str, Any],
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        """Update existing attributes of an entity."""
        raise NotImplementedError

    @abstractmethod
    def update_attribute_value(
        self,
        entity_id: str,
        attr_name: str,
        attr_value: Any,
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        """Replace the value of a single attribute."""
        raise NotImplementedError

    @abstractmethod
    def delete_entity(
        self, entity_id: str, fiware_service: str, fiware_service_path: str
    ) -> OrionResult:
        """Remove an entity."""
        raise NotImplementedError
