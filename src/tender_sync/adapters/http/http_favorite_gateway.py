"""httpx implementation of FavoriteGateway."""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tender_sync.adapters.http.dtos import TenderDTO
from tender_sync.adapters.http.tender_mapper import TenderMapper
from tender_sync.adapters.http.transport import read_json, send
from tender_sync.domain.errors import FetchError
from tender_sync.domain.tender import Tender
from tender_sync.ports.favorite_gateway import FavoriteGateway

FAVORITES_PATH = "/api/favorites"

_favorite_ids_adapter = TypeAdapter(list[str])
_favorites_adapter = TypeAdapter(list[TenderDTO])


class HttpFavoriteGateway(FavoriteGateway):
    """Talks to the favorite endpoints; add/remove outcomes are status-only."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_favorite_ids(self) -> list[str]:
        url = f"{FAVORITES_PATH}/ids"
        response = await send(self._client, "GET", url)
        try:
            return _favorite_ids_adapter.validate_python(read_json(response) or [])
        except PydanticValidationError as exc:
            raise FetchError("Malformed favorite id list", url=url) from exc

    async def fetch_favorites(self) -> list[Tender]:
        response = await send(self._client, "GET", FAVORITES_PATH)
        try:
            dtos = _favorites_adapter.validate_python(read_json(response) or [])
        except PydanticValidationError as exc:
            raise FetchError("Malformed favorite list", url=FAVORITES_PATH) from exc
        return [TenderMapper.to_domain(dto) for dto in dtos]

    async def add_favorite(self, management_no: str) -> None:
        await send(self._client, "POST", self._item_path(management_no))

    async def remove_favorite(self, management_no: str) -> None:
        await send(self._client, "DELETE", self._item_path(management_no))

    @staticmethod
    def _item_path(management_no: str) -> str:
        return f"{FAVORITES_PATH}/{quote(management_no, safe='')}"
