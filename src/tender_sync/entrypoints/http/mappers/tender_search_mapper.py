from __future__ import annotations

from tender_sync.domain.query import decode_filters
from tender_sync.domain.tender import PageRequest, TenderFilters
from tender_sync.entrypoints.http.dtos.tender_search import (
    TenderListQueryDTO,
    TenderSearchQueryDTO,
)


class TenderSearchMapper:
    """Maps search query DTOs to domain criteria and paging."""

    @staticmethod
    def to_domain_filters(dto: TenderSearchQueryDTO) -> TenderFilters:
        """
        Converts wire query params to domain filters.

        Values are passed through untouched; the catalog decides whether
        they are acceptable.
        """
        return decode_filters(dto.model_dump(exclude={"pageNo", "numOfRows"}))

    @staticmethod
    def to_domain_paging(dto: TenderSearchQueryDTO | TenderListQueryDTO) -> PageRequest:
        return PageRequest(page_no=dto.pageNo, num_of_rows=dto.numOfRows)
