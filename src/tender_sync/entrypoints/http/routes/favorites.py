from fastapi import APIRouter, Depends, Response, status

from tender_sync.adapters.http.dtos import TenderDTO
from tender_sync.adapters.http.tender_mapper import TenderMapper
from tender_sync.adapters.in_memory_tender_service import InMemoryTenderService
from tender_sync.entrypoints.http.dependencies import get_tender_service
from tender_sync.entrypoints.http.error_responses import ErrorResponse


router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=list[TenderDTO], summary="Favorite tenders with full detail")
def list_favorites(
    service: InMemoryTenderService = Depends(get_tender_service),
) -> list[TenderDTO]:
    return [TenderMapper.to_dto(tender) for tender in service.favorites()]


@router.get("/ids", response_model=list[str], summary="Management numbers of favorite tenders")
def list_favorite_ids(
    service: InMemoryTenderService = Depends(get_tender_service),
) -> list[str]:
    return service.favorite_ids()


@router.post(
    "/{management_no}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Add a favorite",
    responses={404: {"model": ErrorResponse, "description": "Unknown tender"}},
)
def add_favorite(
    management_no: str,
    service: InMemoryTenderService = Depends(get_tender_service),
) -> Response:
    service.add(management_no)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{management_no}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a favorite",
    responses={404: {"model": ErrorResponse, "description": "Not a favorite"}},
)
def remove_favorite(
    management_no: str,
    service: InMemoryTenderService = Depends(get_tender_service),
) -> Response:
    service.remove(management_no)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
