"""
HTTP verb helpers for the Orion gateway.

Each helper performs exactly one request with a short-lived ``httpx.Client``
and reports the outcome as an ``OrionResult``. Transport failures are logged
and returned, never raised.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import httpx

from fiware_orion_client.domain.entities.errors import InvalidArgumentsError
from fiware_orion_client.domain.entities.result import OrionErrorKind, OrionResult
from fiware_orion_client.shared import get_logger
from fiware_orion_client.shared.consts import (
    CONTENT_TYPE_HEADER,
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
)

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def merge_headers(
    headers: Optional[Mapping[str, str]],
    credential: Optional[Mapping[str, str]],
) -> Dict[str, str]:
    """
    Merge ``credential`` on top of ``headers``; credential entries win.

    Neither mapping is modified.

    Raises:
        InvalidArgumentsError: If either operand is missing.
    """
    if headers is None or credential is None:
        raise InvalidArgumentsError(
            details={
                "headers_missing": headers is None,
                "credential_missing": credential is None,
            }
        )
    return {**headers, **credential}


def get_request(
    url: str, headers: Mapping[str, str], *, timeout: float = DEFAULT_TIMEOUT
) -> OrionResult:
    """GET ``url`` and decode the JSON response body."""
    return _send("GET", url, headers, timeout=timeout, decode=True)


def post_request(
    url: str,
    headers: Mapping[str, str],
    payload: Any,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> OrionResult:
    return _send(
        "POST",
        url,
        _with_content_type(headers, JSON_CONTENT_TYPE),
        timeout=timeout,
        content=json.dumps(payload),
    )


def patch_request(
    url: str,
    headers: Mapping[str, str],
    payload: Any,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> OrionResult:
    return _send(
        "PATCH",
        url,
        _with_content_type(headers, JSON_CONTENT_TYPE),
        timeout=timeout,
        content=json.dumps(payload),
    )


def put_request(
    url: str,
    headers: Mapping[str, str],
    value: Any,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> OrionResult:
    """
    PUT a JSON-encoded ``value`` declared as ``text/plain``.

    Deployed Orion integrations rely on this pairing, so a string is sent
    quoted and a number bare.
    """
    return _send(
        "PUT",
        url,
        _with_content_type(headers, TEXT_CONTENT_TYPE),
        timeout=timeout,
        content=json.dumps(value),
    )


def delete_request(
    url: str, headers: Mapping[str, str], *, timeout: float = DEFAULT_TIMEOUT
) -> OrionResult:
    return _send("DELETE", url, headers, timeout=timeout)


def _with_content_type(headers: Mapping[str, str], content_type: str) -> Dict[str, str]:
    # Applied after the credential merge; a credential cannot change it.
    return {**headers, CONTENT_TYPE_HEADER: content_type}


def _send(
    method: str,
    url: str,
    headers: Mapping[str, str],
    *,
    timeout: float,
    content: Optional[str] = None,
    decode: bool = False,
) -> OrionResult:
    logger.debug("orion.request.send", method=method, url=url)

    try:
        with httpx.Client(timeout=timeout) as client:
            response = client.request(
                method, url, headers=dict(headers), content=content
            )
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "orion.request.http_error",
            method=method,
            url=url,
            status_code=exc.response.status_code,
            response_text=exc.response.text,
        )
        return OrionResult.failure(
            OrionErrorKind.HTTP_ERROR,
            f"Orion returned HTTP {exc.response.status_code}: {exc.response.text}",
            status_code=exc.response.status_code,
        )
    except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        # Header values httpx cannot encode fail while building the request.
        logger.error(
            "orion.request.request_error", method=method, url=url, error=str(exc)
        )
        return OrionResult.failure(
            OrionErrorKind.REQUEST_ERROR, f"Failed to communicate with Orion: {exc}"
        )

    logger.debug(
        "orion.request.completed",
        method=method,
        url=url,
        status_code=response.status_code,
    )
    if not decode:
        return OrionResult.success(response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        logger.error(
            "orion.request.decode_error",
            method=method,
            url=url,
            status_code=response.status_code,
            error=str(exc),
        )
        return OrionResult.failure(
            OrionErrorKind.DECODE_ERROR,
            f"Invalid JSON in Orion response: {exc}",
            status_code=response.status_code,
        )
    return OrionResult.success(response.status_code, data)
