from __future__ import annotations

import httpx
import pytest

from tender_sync.infra.http_client import build_client
from tender_sync.infra.session import build_session


@pytest.fixture
def client() -> httpx.AsyncClient:
    transport = httpx.MockTransport(lambda request: httpx.Response(204))
    return build_client(base_url="http://tenders.test", timeout=1.0, transport=transport)


def test_page_size_defaults_to_environment(
    client: httpx.AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TENDER_PAGE_SIZE", "25")

    session = build_session(client)

    assert session.search.state.page.num_of_rows == 25


async def test_session_talks_through_the_client(client: httpx.AsyncClient) -> None:
    session = build_session(client, page_size=5)

    await session.start()

    assert session.search.state.tenders == ()
    assert session.search.state.page.num_of_rows == 5
    assert session.favorites.favorite_ids == frozenset()
