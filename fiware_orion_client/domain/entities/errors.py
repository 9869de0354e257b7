"""
Domain Errors

Errors raised to callers. Transport failures are never raised; they are
reported through ``OrionResult``.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentsError(DomainError):
    """Raised when a header merge receives a missing operand."""

    def __init__(
        self,
        message: str = "invalid arguments",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
