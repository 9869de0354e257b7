"""Outcome of a single request against Orion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OrionErrorKind(str, Enum):
    HTTP_ERROR = "http_error"
    REQUEST_ERROR = "request_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True, slots=True)
class OrionResult:
    """
    Explicit result of one Orion call.

    ``error`` is None on success. Callers that only want fire-and-forget
    behaviour can ignore the result altogether.
    """

    status_code: Optional[int] = None
    data: Any = None
    error: Optional[OrionErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, status_code: int, data: Any = None) -> "OrionResult":
        return cls(status_code=status_code, data=data)

    @classmethod
    def failure(
        cls,
        error: OrionErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ) -> "OrionResult":
        return cls(status_code=status_code, error=error, message=message)
