"""
Tests for the httpx gateways against a scripted transport.

Verifies request shape (method, path, ordered query parameters), absent
payload handling, and translation of transport/status failures into
domain errors.
"""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from tender_sync.adapters.http.http_favorite_gateway import HttpFavoriteGateway
from tender_sync.adapters.http.http_tender_gateway import HttpTenderGateway
from tender_sync.domain.errors import FetchError, HttpError, NetworkError
from tender_sync.domain.lifecycle import RequestStatus
from tender_sync.domain.query import encode_query
from tender_sync.domain.tender import PageDescriptor, PageRequest, TenderFilters, TenderPage
from tender_sync.infra.http_client import build_client
from tender_sync.use_cases.search_tenders import SearchTenders

BASE_URL = "http://tenders.test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def client_for(requests: list[httpx.Request]):
    """Builds an AsyncClient whose transport records requests and answers via ``handler``."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return build_client(
            base_url=BASE_URL, timeout=5.0, transport=httpx.MockTransport(recording)
        )

    return factory


def _seoul_query():
    return encode_query(TenderFilters(sido="서울특별시"), PageRequest(page_no=1, num_of_rows=10))


# ==============================================================================
# HttpTenderGateway
# ==============================================================================


async def test_fetch_page_sends_encoded_parameters(client_for, requests) -> None:
    body = {
        "tenders": [{"cltrMnmtNo": "2024-0000-000001", "tenderTitle": "아파트", "sido": "서울특별시"}],
        "totalCount": 23,
        "pageNo": 1,
        "numOfRows": 10,
    }
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        page = await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert requests[0].method == "GET"
    assert requests[0].url.path == "/api/tenders/search"
    assert list(requests[0].url.params.multi_items()) == [
        ("sido", "서울특별시"),
        ("pageNo", "1"),
        ("numOfRows", "10"),
    ]
    assert requests[0].headers["accept"] == "application/json"
    assert page.page == PageDescriptor(page_no=1, num_of_rows=10, total_count=23)
    assert page.tenders[0].display_fields == {"sido": "서울특별시"}


async def test_plain_listing_uses_list_endpoint(client_for, requests) -> None:
    query = encode_query(TenderFilters(), PageRequest(page_no=2, num_of_rows=20))
    async with client_for(lambda request: httpx.Response(200, json={"totalCount": 0})) as client:
        await HttpTenderGateway(client).fetch_page(query)

    assert requests[0].url.path == "/api/tenders"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(204),
        httpx.Response(200, content=b""),
        httpx.Response(200, content=b"null"),
        httpx.Response(200, content=b"<html>not json</html>"),
        httpx.Response(200, json=[1, 2, 3]),
    ],
)
async def test_absent_or_unreadable_payload_is_empty_page(client_for, response: httpx.Response) -> None:
    async with client_for(lambda request: response) as client:
        page = await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert page == TenderPage.empty(10)


async def test_error_status_raises_http_error_with_server_message(client_for) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "upstream unavailable", "code": "INTERNAL_ERROR"})

    async with client_for(handler) as client:
        with pytest.raises(HttpError) as exc_info:
            await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "HTTP error! status: 500 - upstream unavailable"


async def test_error_status_with_plain_text_body(client_for) -> None:
    async with client_for(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
        with pytest.raises(HttpError) as exc_info:
            await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert exc_info.value.server_message == "Bad Gateway"


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (httpx.ReadTimeout("timed out"), "Request timed out: GET /api/tenders/search"),
        (httpx.ConnectError("refused"), "Network error: ConnectError"),
    ],
)
async def test_transport_failures_raise_network_error(
    client_for, error: Exception, message: str
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    async with client_for(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert exc_info.value.message == message


def _listing(number: int, **overrides) -> dict:
    return {"cltrMnmtNo": f"2024-0000-{number:06d}", "tenderTitle": f"물건 {number}", **overrides}


async def test_null_title_is_kept_as_blank(client_for) -> None:
    body = {
        "tenders": [_listing(n) for n in range(1, 5)] + [{"cltrMnmtNo": "K-9", "tenderTitle": None}],
        "totalCount": 23,
        "pageNo": 1,
        "numOfRows": 10,
    }
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        page = await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert len(page.tenders) == 5
    assert page.tenders[-1].management_no == "K-9"
    assert page.tenders[-1].title == ""
    assert page.page.total_count == 23


async def test_malformed_listing_is_skipped(client_for) -> None:
    body = {
        "tenders": [_listing(1), _listing(2, tenderId="not-a-number"), "junk", _listing(3)],
        "totalCount": 23,
        "pageNo": 2,
        "numOfRows": 10,
    }
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        page = await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert [tender.management_no for tender in page.tenders] == [
        "2024-0000-000001",
        "2024-0000-000003",
    ]
    assert page.page == PageDescriptor(page_no=2, num_of_rows=10, total_count=23)


async def test_non_list_listings_keep_page_metadata(client_for) -> None:
    body = {"tenders": "not a list", "totalCount": 23, "pageNo": 1, "numOfRows": 10}
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        page = await HttpTenderGateway(client).fetch_page(_seoul_query())

    assert page.tenders == ()
    assert page.page.total_count == 23


async def test_malformed_page_metadata_raises_fetch_error(client_for) -> None:
    body = {"tenders": [_listing(1)], "totalCount": "many", "pageNo": 1}
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        with pytest.raises(FetchError, match="Malformed tender page"):
            await HttpTenderGateway(client).fetch_page(_seoul_query())


async def test_malformed_page_keeps_previous_results(client_for) -> None:
    good = {"tenders": [_listing(1), _listing(2)], "totalCount": 2, "pageNo": 1, "numOfRows": 10}
    bodies = iter([good, {"totalCount": "many"}])

    async with client_for(lambda request: httpx.Response(200, json=next(bodies))) as client:
        search = SearchTenders(HttpTenderGateway(client), page_size=10)
        first = await search.load_initial()
        state = await search.submit(TenderFilters(sido="서울특별시"))

    assert state.status is RequestStatus.FAILED
    assert state.error == "Malformed tender page"
    assert state.tenders == first.tenders
    assert state.page.total_count == 2


# ==============================================================================
# HttpFavoriteGateway
# ==============================================================================


async def test_fetch_favorite_ids(client_for, requests) -> None:
    ids = ["2024-0000-000001", "2024-0000-000002"]
    async with client_for(lambda request: httpx.Response(200, json=ids)) as client:
        assert await HttpFavoriteGateway(client).fetch_favorite_ids() == ids

    assert requests[0].url.path == "/api/favorites/ids"


async def test_empty_favorite_id_body_is_empty_list(client_for) -> None:
    async with client_for(lambda request: httpx.Response(204)) as client:
        assert await HttpFavoriteGateway(client).fetch_favorite_ids() == []


async def test_malformed_favorite_ids_raise_fetch_error(client_for) -> None:
    body = {"ids": ["A"]}
    async with client_for(lambda request: httpx.Response(200, content=json.dumps(body))) as client:
        with pytest.raises(FetchError, match="Malformed favorite id list"):
            await HttpFavoriteGateway(client).fetch_favorite_ids()


async def test_fetch_favorites_maps_listings(client_for, requests) -> None:
    body = [{"cltrMnmtNo": "2024-0000-000001", "tenderTitle": "아파트", "deadline": "2024-05-03 17:00:00"}]
    async with client_for(lambda request: httpx.Response(200, json=body)) as client:
        favorites = await HttpFavoriteGateway(client).fetch_favorites()

    assert requests[0].url.path == "/api/favorites"
    assert [tender.management_no for tender in favorites] == ["2024-0000-000001"]


async def test_add_and_remove_use_item_path(client_for, requests) -> None:
    async with client_for(lambda request: httpx.Response(204)) as client:
        gateway = HttpFavoriteGateway(client)
        await gateway.add_favorite("2024-0000-000001")
        await gateway.remove_favorite("2024-0000-000001")

    assert [(r.method, r.url.path) for r in requests] == [
        ("POST", "/api/favorites/2024-0000-000001"),
        ("DELETE", "/api/favorites/2024-0000-000001"),
    ]


async def test_identifier_is_path_escaped(client_for, requests) -> None:
    async with client_for(lambda request: httpx.Response(204)) as client:
        await HttpFavoriteGateway(client).add_favorite("a/b c")

    assert requests[0].url.raw_path == b"/api/favorites/a%2Fb%20c"


async def test_toggle_failure_raises_http_error(client_for) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Favorite not found", "code": "NOT_FOUND"})

    async with client_for(handler) as client:
        with pytest.raises(HttpError) as exc_info:
            await HttpFavoriteGateway(client).remove_favorite("2024-0000-000001")

    assert exc_info.value.status_code == 404
