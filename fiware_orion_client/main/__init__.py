"""
Main module - Composition Root Layer

Entry points for building an Orion client: the plain ``create_client``
factory, and the settings-driven container for applications that configure
the client from the environment.
"""

from .client import create_client
from .config import AppSettings, get_settings
from .container import OrionClientContainer, get_container, init_container

__all__ = [
    "create_client",
    "AppSettings",
    "get_settings",
    "OrionClientContainer",
    "init_container",
    "get_container",
]
