"""
FIWARE Orion Context Broker client.

Thin synchronous client for the Orion NGSI v2 entity API.

Layer Structure:
- Domain: Client contract, result type and errors
- Infrastructure: HTTP verb helpers and the Orion gateway implementation
- Shared: Cross-cutting concerns and shared utilities
- Main: Client factory, configuration and composition root
"""

from fiware_orion_client.domain.entities import InvalidArgumentsError, OrionResult
from fiware_orion_client.infrastructure.gateways import OrionGateway
from fiware_orion_client.main.client import create_client

__version__ = "1.0.0"

__all__ = [
    "InvalidArgumentsError",
    "OrionGateway",
    "OrionResult",
    "create_client",
]
