"""httpx implementation of TenderGateway."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from tender_sync.adapters.http.dtos import PagedTenderResponseDTO, TenderDTO
from tender_sync.adapters.http.tender_mapper import TenderMapper
from tender_sync.adapters.http.transport import read_json, send
from tender_sync.domain.errors import FetchError
from tender_sync.domain.query import TenderQuery
from tender_sync.domain.tender import TenderPage
from tender_sync.ports.tender_gateway import TenderGateway

logger = logging.getLogger(__name__)


class HttpTenderGateway(TenderGateway):
    """
    Fetches listing pages from the tender service over HTTP.

    - Sends the query's parameters in their encoded order
    - Treats 204, an empty body, ``null`` or an unreadable body as the
      absent payload
    - Skips individual listings that fail validation and keeps the rest
    - Raises ``FetchError`` when the page metadata itself is malformed
    - Leaves timeouts to the client configuration
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize gateway with an HTTP client.

        Args:
            client: Async client with base URL and timeout configured
        """
        self._client = client

    async def fetch_page(self, query: TenderQuery) -> TenderPage:
        response = await send(
            self._client, "GET", query.endpoint.value, params=list(query.params)
        )
        payload = read_json(response)

        dto = self._parse_page(payload, query) if isinstance(payload, dict) else None

        page = TenderMapper.to_domain_page(dto, requested_rows=query.num_of_rows)
        logger.debug(
            "Fetched tender page",
            extra={
                "endpoint": query.endpoint.value,
                "page_no": page.page.page_no,
                "count": len(page.tenders),
                "total_count": page.page.total_count,
            },
        )
        return page

    def _parse_page(self, payload: dict[str, Any], query: TenderQuery) -> PagedTenderResponseDTO:
        try:
            dto = PagedTenderResponseDTO.model_validate({**payload, "tenders": None})
        except PydanticValidationError as exc:
            logger.warning(
                "Tender page metadata did not match the expected shape",
                extra={"endpoint": query.endpoint.value, "error_count": exc.error_count()},
            )
            raise FetchError(
                "Malformed tender page", endpoint=query.endpoint.value
            ) from exc

        items = payload.get("tenders")
        if items is None:
            return dto
        if not isinstance(items, list):
            logger.warning(
                "Tender page listings were not a list",
                extra={"endpoint": query.endpoint.value},
            )
            return dto

        tenders: list[TenderDTO] = []
        for index, item in enumerate(items):
            try:
                tenders.append(TenderDTO.model_validate(item))
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed tender listing",
                    extra={
                        "endpoint": query.endpoint.value,
                        "index": index,
                        "error_count": exc.error_count(),
                    },
                )
        return dto.model_copy(update={"tenders": tenders})
