from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

from fiware_orion_client.infrastructure.gateways.orion_gateway import OrionGateway
from fiware_orion_client.main.client import create_client

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE_URL = "https://host:1026"


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    content: Optional[str]


class StubTransport:
    """Stands in for ``httpx.Client`` and records every request it serves."""

    def __init__(self) -> None:
        self.requests: List[RecordedRequest] = []
        self.timeouts: List[Any] = []
        self.status_code = 200
        self.json_data: Any = None
        self.text: Optional[str] = None
        self.error: Optional[Exception] = None

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    def client_factory(self, *args: Any, timeout: Any = None, **kwargs: Any) -> "_StubClient":
        self.timeouts.append(timeout)
        return _StubClient(self)

    def respond(self, method: str, url: str) -> httpx.Response:
        if self.error is not None:
            raise self.error
        request = httpx.Request(method, url)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        if self.json_data is not None:
            return httpx.Response(
                self.status_code, json=self.json_data, request=request
            )
        return httpx.Response(self.status_code, request=request)


class _StubClient:
    def __init__(self, transport: StubTransport) -> None:
        self._transport = transport

    def __enter__(self) -> "_StubClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def request(self, method: str, url: str, *, headers=None, content=None):
        # Building the request encodes headers exactly as a real client would.
        httpx.Request(method, url, headers=headers, content=content)
        self._transport.requests.append(
            RecordedRequest(method=method, url=url, headers=headers, content=content)
        )
        return self._transport.respond(method, url)


@pytest.fixture()
def stub_transport(monkeypatch: pytest.MonkeyPatch) -> StubTransport:
    transport = StubTransport()
    monkeypatch.setattr("httpx.Client", transport.client_factory)
    return transport


@pytest.fixture()
def credential() -> Dict[str, str]:
    return {"Authorization": "Bearer test-token"}


@pytest.fixture()
def orion_client(credential: Dict[str, str]) -> OrionGateway:
    return create_client(BASE_URL, credential)
