from fastapi import APIRouter, Depends, Response, status

from tender_sync.adapters.http.dtos import PagedTenderResponseDTO
from tender_sync.adapters.http.tender_mapper import TenderMapper
from tender_sync.adapters.in_memory_tender_service import InMemoryTenderService
from tender_sync.domain.tender import TenderFilters
from tender_sync.entrypoints.http.dependencies import get_tender_service
from tender_sync.entrypoints.http.dtos.tender_search import (
    TenderListQueryDTO,
    TenderSearchQueryDTO,
)
from tender_sync.entrypoints.http.error_responses import ErrorResponse
from tender_sync.entrypoints.http.mappers.tender_search_mapper import TenderSearchMapper


router = APIRouter(tags=["Tenders"])


@router.get(
    "/tenders",
    response_model=PagedTenderResponseDTO,
    summary="List tenders",
    description="""
    Unfiltered, paged listing of the catalog.

    A page number past the end is clamped to the last page; the response
    always reports the page actually returned.
    """,
)
def list_tenders(
    query: TenderListQueryDTO = Depends(),
    service: InMemoryTenderService = Depends(get_tender_service),
) -> PagedTenderResponseDTO:
    page = service.search(TenderFilters(), TenderSearchMapper.to_domain_paging(query))
    return TenderMapper.to_response(page)


@router.get(
    "/tenders/search",
    response_model=PagedTenderResponseDTO,
    summary="Search tenders",
    description="""
    Search the catalog with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - cltrNm: case-insensitive substring
    - dpslMtdCd/sido/sgk/emd: exact match
    - Prices: inclusive ranges
    - pbctBegnDtm/pbctClsDtm: YYYYMMDD, auction window containment

    ## Example
    ```
    GET /api/tenders/search?sido=서울특별시&pageNo=1&numOfRows=10
    ```

    Returns 204 No Content when the requested page holds no listings.
    """,
    responses={
        204: {"description": "No listings match"},
        422: {"model": ErrorResponse, "description": "Malformed filter value"},
    },
)
def search_tenders(
    query: TenderSearchQueryDTO = Depends(),
    service: InMemoryTenderService = Depends(get_tender_service),
) -> PagedTenderResponseDTO | Response:
    """Search endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain criteria
    filters = TenderSearchMapper.to_domain_filters(query)
    paging = TenderSearchMapper.to_domain_paging(query)

    # 2. Execute search
    page = service.search(filters, paging)

    # 3. Map to response
    if not page.tenders:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return TenderMapper.to_response(page)
