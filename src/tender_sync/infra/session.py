from __future__ import annotations

import httpx

from tender_sync.adapters.http.http_favorite_gateway import HttpFavoriteGateway
from tender_sync.adapters.http.http_tender_gateway import HttpTenderGateway
from tender_sync.infra.config import default_page_size
from tender_sync.use_cases.catalog_session import CatalogSession
from tender_sync.use_cases.favorite_sync import FavoriteSyncEngine
from tender_sync.use_cases.search_tenders import SearchTenders


def build_session(client: httpx.AsyncClient, page_size: int | None = None) -> CatalogSession:
    """
    Wire both streams to the HTTP gateways sharing ``client``.

    Args:
        client: Client from ``build_client``/``open_client``
        page_size: Rows per page (TENDER_PAGE_SIZE when omitted)
    """
    return CatalogSession(
        SearchTenders(
            HttpTenderGateway(client),
            page_size=page_size if page_size is not None else default_page_size(),
        ),
        FavoriteSyncEngine(HttpFavoriteGateway(client)),
    )
