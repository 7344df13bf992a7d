from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable

from tender_sync.domain.errors import HttpError, NotFoundError, ValidationError
from tender_sync.domain.query import TenderQuery, decode_filters, encode_date
from tender_sync.domain.tender import (
    FilterValue,
    PageDescriptor,
    PageRequest,
    Tender,
    TenderFilters,
    TenderPage,
)
from tender_sync.ports.favorite_gateway import FavoriteGateway
from tender_sync.ports.tender_gateway import TenderGateway

# Display-field keys the catalog filters on besides title and dates.
EXACT_MATCH_FIELDS: tuple[tuple[str, str], ...] = (
    ("disposal_method", "dpslMtdCd"),
    ("sido", "sido"),
    ("sgk", "sgk"),
    ("emd", "emd"),
)
RANGE_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("appraisal_price_min", "appraisal_price_max", "goodsPrice"),
    ("bid_price_min", "bid_price_max", "openPrice"),
)


class InMemoryTenderService(TenderGateway, FavoriteGateway):
    """
    Canonical contract implementation of the remote tender service.

    - Stores tenders in insertion order
    - Applies AND-semantics filtering, then paging
    - Clamps a page number past the end to the last page
    - Keeps one user's favorites keyed by management number

    Backs the reference HTTP service and doubles as an in-process gateway
    for tests of the streams.
    """

    def __init__(self, tenders: list[Tender], favorite_ids: Iterable[str] = ()) -> None:
        self._tenders = tenders
        self._favorites: dict[str, None] = dict.fromkeys(favorite_ids)

    # ------------------------------------------------------------------
    # Service operations
    # ------------------------------------------------------------------

    def search(self, filters: TenderFilters, page_request: PageRequest) -> TenderPage:
        page_request.validate()

        matches = [tender for tender in self._tenders if self._matches(tender, filters)]
        total_count = len(matches)  # Count BEFORE paging

        rows = page_request.num_of_rows
        last_page = max(1, -(-total_count // rows))
        page_no = min(page_request.page_no, last_page)

        start = (page_no - 1) * rows
        return TenderPage(
            tenders=tuple(matches[start : start + rows]),
            page=PageDescriptor(page_no=page_no, num_of_rows=rows, total_count=total_count),
        )

    def favorite_ids(self) -> list[str]:
        return list(self._favorites)

    def favorites(self) -> list[Tender]:
        by_key = {tender.management_no: tender for tender in self._tenders}
        return [by_key[key] for key in self._favorites if key in by_key]

    def add(self, management_no: str) -> None:
        if not any(tender.management_no == management_no for tender in self._tenders):
            raise NotFoundError(resource="Tender", identifier=management_no)
        self._favorites[management_no] = None

    def remove(self, management_no: str) -> None:
        if management_no not in self._favorites:
            raise NotFoundError(resource="Favorite", identifier=management_no)
        del self._favorites[management_no]

    # ------------------------------------------------------------------
    # Gateway ports
    # ------------------------------------------------------------------

    async def fetch_page(self, query: TenderQuery) -> TenderPage:
        filters = decode_filters(dict(query.params))
        page_request = PageRequest(page_no=query.page_no, num_of_rows=query.num_of_rows)
        try:
            return self.search(filters, page_request)
        except ValidationError as exc:
            raise HttpError(422, exc.message) from exc

    async def fetch_favorite_ids(self) -> list[str]:
        return self.favorite_ids()

    async def fetch_favorites(self) -> list[Tender]:
        return self.favorites()

    async def add_favorite(self, management_no: str) -> None:
        try:
            self.add(management_no)
        except NotFoundError as exc:
            raise HttpError(404, exc.message) from exc

    async def remove_favorite(self, management_no: str) -> None:
        try:
            self.remove(management_no)
        except NotFoundError as exc:
            raise HttpError(404, exc.message) from exc

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def _matches(self, tender: Tender, filters: TenderFilters) -> bool:
        if filters.title and str(filters.title).lower() not in tender.title.lower():
            return False

        for field_name, key in EXACT_MATCH_FIELDS:
            wanted = getattr(filters, field_name)
            if wanted is not None and str(tender.display_fields.get(key)) != str(wanted):
                return False

        for min_name, max_name, key in RANGE_FIELDS:
            low = _to_decimal(min_name, getattr(filters, min_name))
            high = _to_decimal(max_name, getattr(filters, max_name))
            if low is None and high is None:
                continue
            raw = tender.display_fields.get(key)
            if raw is None:
                return False
            value = Decimal(str(raw))
            if low is not None and value < low:
                return False
            if high is not None and value > high:
                return False

        start = _to_date("auction_start", filters.auction_start)
        if start is not None:
            if tender.announcement_date is None or tender.announcement_date.date() < start:
                return False
        end = _to_date("auction_end", filters.auction_end)
        if end is not None:
            if tender.deadline is None or tender.deadline.date() > end:
                return False

        return True


def _to_decimal(field_name: str, value: FilterValue) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(
            errors=[{"field": field_name, "message": "Must be a number", "code": "INVALID_NUMBER"}]
        )


def _to_date(field_name: str, value: FilterValue) -> date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(encode_date(value), "%Y%m%d").date()
    except ValueError:
        raise ValidationError(
            errors=[{"field": field_name, "message": "Must be YYYYMMDD", "code": "INVALID_DATE"}]
        )
