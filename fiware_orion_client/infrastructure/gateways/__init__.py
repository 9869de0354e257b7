"""
Gateways Package - Infrastructure Layer

Concrete implementations of the gateway interfaces defined in the domain
layer.
"""

from .orion_gateway import OrionGateway

__all__ = ["OrionGateway"]
