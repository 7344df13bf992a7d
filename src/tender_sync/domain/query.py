"""Query encoding: filter criteria + paging -> canonical request descriptor.

Encoding is pure and deterministic. Equal criteria and equal paging always
produce equal descriptors, which is what lets the search stream and the tests
compare requests by value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Mapping
from urllib.parse import urlencode

from tender_sync.domain.tender import FilterValue, PageRequest, TenderFilters


class TenderEndpoint(str, Enum):
    LIST = "/api/tenders"
    SEARCH = "/api/tenders/search"


# Wire order of the filter parameters; paging always follows.
FILTER_PARAMETERS: tuple[tuple[str, str], ...] = (
    ("title", "cltrNm"),
    ("disposal_method", "dpslMtdCd"),
    ("sido", "sido"),
    ("sgk", "sgk"),
    ("emd", "emd"),
    ("appraisal_price_min", "goodsPriceFrom"),
    ("appraisal_price_max", "goodsPriceTo"),
    ("bid_price_min", "openPriceFrom"),
    ("bid_price_max", "openPriceTo"),
    ("auction_start", "pbctBegnDtm"),
    ("auction_end", "pbctClsDtm"),
)

_DATE_FIELDS = frozenset({"auction_start", "auction_end"})
_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class TenderQuery:
    endpoint: TenderEndpoint
    params: tuple[tuple[str, str], ...]

    @property
    def page_no(self) -> int:
        return int(dict(self.params)["pageNo"])

    @property
    def num_of_rows(self) -> int:
        return int(dict(self.params)["numOfRows"])

    def query_string(self) -> str:
        return urlencode(self.params)

    def path(self) -> str:
        return f"{self.endpoint.value}?{self.query_string()}"


def encode_date(value: FilterValue) -> str:
    """Normalize a date criterion to ``YYYYMMDD``.

    Strings keep only their digits, so ``"2024-05-01"`` and ``"2024.05.01"``
    both become ``"20240501"``.
    """
    if isinstance(value, datetime):
        return value.strftime("%Y%m%d")
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    return _NON_DIGITS.sub("", str(value))


def encode_query(filters: TenderFilters, page_request: PageRequest) -> TenderQuery:
    """
    Build the request descriptor for a search.

    Only constrained dimensions are emitted. Values are forwarded as-is
    (no local validation); the server rejects malformed ones.

    Args:
        filters: Search criteria
        page_request: Requested page and page size

    Returns:
        TenderQuery with endpoint and ordered parameters

    Raises:
        PagingValidationError: If paging parameters are invalid
    """
    page_request.validate()

    params: list[tuple[str, str]] = []
    for field_name, wire_name in FILTER_PARAMETERS:
        value = getattr(filters, field_name)
        if value is None:
            continue
        encoded = encode_date(value) if field_name in _DATE_FIELDS else str(value)
        if encoded:
            params.append((wire_name, encoded))

    endpoint = TenderEndpoint.SEARCH if params else TenderEndpoint.LIST

    params.append(("pageNo", str(page_request.page_no)))
    params.append(("numOfRows", str(page_request.num_of_rows)))

    return TenderQuery(endpoint=endpoint, params=tuple(params))


def decode_filters(params: Mapping[str, str | None]) -> TenderFilters:
    """Inverse of the filter half of ``encode_query``; unknown keys are ignored."""
    return TenderFilters(
        **{
            field_name: params.get(wire_name)
            for field_name, wire_name in FILTER_PARAMETERS
        }
    )
