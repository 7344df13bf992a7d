from __future__ import annotations

import httpx
import pytest

from tender_sync.infra.http_client import build_client, open_client


def test_build_client_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TENDER_API_BASE_URL", "http://tenders.test/")
    monkeypatch.setenv("TENDER_API_TIMEOUT", "3")

    client = build_client()

    assert str(client.base_url).rstrip("/") == "http://tenders.test"
    assert client.timeout == httpx.Timeout(3.0)
    assert client.headers["accept"] == "application/json"


def test_explicit_arguments_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TENDER_API_BASE_URL", raising=False)

    client = build_client(base_url="http://other.test", timeout=1.0)

    assert str(client.base_url).rstrip("/") == "http://other.test"
    assert client.timeout == httpx.Timeout(1.0)


async def test_open_client_closes_on_exit() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"status": "ok"}))

    async with open_client(base_url="http://tenders.test", timeout=1.0, transport=transport) as client:
        response = await client.get("/health")
        assert response.json() == {"status": "ok"}

    assert client.is_closed
