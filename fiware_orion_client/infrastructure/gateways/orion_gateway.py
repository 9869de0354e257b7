"""Orion Context Broker gateway implementation."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fiware_orion_client.domain.entities.result import OrionResult
from fiware_orion_client.domain.gateways.orion_gateway import IOrionGateway
from fiware_orion_client.infrastructure.http import verbs
from fiware_orion_client.shared import get_logger
from fiware_orion_client.shared.consts import (
    ENTITIES_PATH,
    FIWARE_SERVICE_HEADER,
    FIWARE_SERVICE_PATH_HEADER,
)

logger = get_logger(__name__)


class OrionGateway(IOrionGateway):
    """HTTP-based Orion Context Broker gateway bound to one credential."""

    def __init__(
        self,
        base_url: str,
        credential: Optional[Mapping[str, str]],
        timeout: float = verbs.DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credential = credential
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credential(self) -> Optional[Mapping[str, str]]:
        return self._credential

    def list_entities(
        self, fiware_service: str, fiware_service_path: str
    ) -> Optional[Any]:
        """Return the entity list, or None when the request failed."""

        headers = self._build_headers(fiware_service, fiware_service_path)
        result = verbs.get_request(self._entities_url(), headers, timeout=self._timeout)
        return result.data if result.ok else None

    def get_entity(
        self, entity_id: str, fiware_service: str, fiware_service_path: str
    ) -> Optional[Any]:
        """Return one entity, or None when the request failed."""

        headers = self._build_headers(fiware_service, fiware_service_path)
        result = verbs.get_request(
            self._entities_url(entity_id), headers, timeout=self._timeout
        )
        return result.data if result.ok else None

    def create_entity(
        self,
        entity: Dict[str, Any],
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        headers = self._build_headers(fiware_service, fiware_service_path)
        logger.info(
            "orion.entity.create",
            service=fiware_service,
            service_path=fiware_service_path,
        )
        return verbs.post_request(
            self._entities_url(), headers, entity, timeout=self._timeout
        )

    def update_entity(
        self,
        entity_id: str,
        attributes: Dict[str, Any],
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        headers = self._build_headers(fiware_service, fiware_service_path)
        logger.info(
            "orion.entity.update",
            entity_id=entity_id,
            service=fiware_service,
            service_path=fiware_service_path,
        )
        return verbs.patch_request(
            f"{self._entities_url(entity_id)}/attrs",
            headers,
            attributes,
            timeout=self._timeout,
        )

    def update_attribute_value(
        self,
        entity_id: str,
        attr_name: str,
        attr_value: Any,
        fiware_service: str,
        fiware_service_path: str,
    ) -> OrionResult:
        headers = self._build_headers(fiware_service, fiware_service_path)
        logger.info(
            "orion.attribute.update_value",
            entity_id=entity_id,
            attr_name=attr_name,
            service=fiware_service,
            service_path=fiware_service_path,
        )
        return verbs.put_request(
            f"{self._entities_url(entity_id)}/attrs/{attr_name}/value",
            headers,
            attr_value,
            timeout=self._timeout,
        )

    def delete_entity(
        self, entity_id: str, fiware_service: str, fiware_service_path: str
    ) -> OrionResult:
        headers = self._build_headers(fiware_service, fiware_service_path)
        logger.info(
            "orion.entity.delete",
            entity_id=entity_id,
            service=fiware_service,
            service_path=fiware_service_path,
        )
        return verbs.delete_request(
            self._entities_url(entity_id), headers, timeout=self._timeout
        )

    def _entities_url(self, entity_id: Optional[str] = None) -> str:
        url = f"{self._base_url}{ENTITIES_PATH}"
        if entity_id is None:
            return url
        return f"{url}/{entity_id}"

    def _build_headers(
        self, fiware_service: str, fiware_service_path: str
    ) -> Dict[str, str]:
        headers: Dict[str, str] = {
            FIWARE_SERVICE_HEADER: fiware_service,
            FIWARE_SERVICE_PATH_HEADER: fiware_service_path,
        }
        return verbs.merge_headers(headers, self._credential)
