"""
Gateways Package - Domain Layer

Interfaces for the external services the client talks to. Concrete
implementations live in the infrastructure layer.
"""

from .orion_gateway import IOrionGateway

__all__ = ["IOrionGateway"]
