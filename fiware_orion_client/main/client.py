"""Client factory."""

from __future__ import annotations

from typing import Mapping, Optional

from fiware_orion_client.infrastructure.gateways.orion_gateway import OrionGateway
from fiware_orion_client.infrastructure.http.verbs import DEFAULT_TIMEOUT


def create_client(
    base_url: str,
    credential: Optional[Mapping[str, str]],
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> OrionGateway:
    """
    Build an Orion client bound to ``base_url`` and ``credential``.

    ``credential`` is a mapping of extra headers (typically
    ``{"Authorization": "Bearer ..."}``) added to every request. Nothing is
    validated here; a bad URL only shows up as a failed request, and a
    missing credential raises ``InvalidArgumentsError`` on the first call.
    """
    return OrionGateway(base_url, credential, timeout=timeout)
