from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from tender_sync.infra.config import api_base_url, request_timeout


def build_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the async HTTP client shared by both gateways.

    Client configuration:
    - base_url: tender service root (TENDER_API_BASE_URL when omitted)
    - timeout: applies to connect/read/write/pool; expiry surfaces as NetworkError
    - transport: injectable for tests (MockTransport, ASGITransport)

    Cookies persist on the client, so a session cookie set at login is sent
    with every favorites call.
    """
    return httpx.AsyncClient(
        base_url=base_url if base_url is not None else api_base_url(),
        timeout=timeout if timeout is not None else request_timeout(),
        headers={"Accept": "application/json"},
        transport=transport,
    )


@asynccontextmanager
async def open_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Async client that is closed when the block exits."""
    client = build_client(base_url=base_url, timeout=timeout, transport=transport)
    try:
        yield client
    finally:
        await client.aclose()
