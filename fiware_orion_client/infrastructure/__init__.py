"""
Infrastructure Layer Package

Implementations of the domain gateway contracts on top of HTTP.
"""

from fiware_orion_client.infrastructure import gateways, http

__all__ = ["gateways", "http"]
