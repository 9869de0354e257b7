"""
Domain Layer Package

This package defines what the client does without depending on the HTTP
transport: the Orion gateway contract, the call result type and the errors
raised to callers.
"""

from fiware_orion_client.domain import entities, gateways

__all__ = ["entities", "gateways"]
