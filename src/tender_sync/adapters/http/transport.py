"""httpx request helper that translates transport outcomes into domain errors."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tender_sync.domain.errors import HttpError, NetworkError

logger = logging.getLogger(__name__)


async def send(client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> httpx.Response:
    """
    Issue a request and return the response if its status is 2xx.

    Args:
        client: Configured async client (base URL, timeout)
        method: HTTP method
        url: Path relative to the client's base URL
        **kwargs: Forwarded to ``httpx.AsyncClient.request``

    Returns:
        The successful response

    Raises:
        NetworkError: If no response was received (including timeouts)
        HttpError: If the response status is not 2xx
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.TimeoutException as exc:
        raise NetworkError(f"Request timed out: {method} {url}", method=method, url=url) from exc
    except httpx.TransportError as exc:
        raise NetworkError(
            f"Network error: {type(exc).__name__}", method=method, url=url
        ) from exc

    if response.is_success:
        return response

    server_message = _server_message(response)
    logger.warning(
        "Tender service returned an error status",
        extra={
            "status_code": response.status_code,
            "server_message": server_message,
            "method": method,
            "url": url,
        },
    )
    raise HttpError(response.status_code, server_message, method=method, url=url)


def read_json(response: httpx.Response) -> Any | None:
    """Body of a successful response, or None when absent or unreadable."""
    if response.status_code == httpx.codes.NO_CONTENT or not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning(
            "Discarding unreadable response body",
            extra={"status_code": response.status_code, "url": str(response.url)},
        )
        return None


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or None

    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None
