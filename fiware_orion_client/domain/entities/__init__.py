"""
Domain Entities Package

NGSI entities themselves are opaque to the client; this package only holds
the types the client produces.
"""

from .errors import DomainError, InvalidArgumentsError
from .result import OrionErrorKind, OrionResult

__all__ = [
    "DomainError",
    "InvalidArgumentsError",
    "OrionErrorKind",
    "OrionResult",
]
