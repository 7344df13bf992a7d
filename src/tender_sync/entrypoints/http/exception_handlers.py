"""Maps the reference service's failures onto HTTP responses.

The service only fails in three ways: a malformed price/date filter or
out-of-range paging (``ValidationError``), an unknown tender or favorite on
the favorites endpoints (``NotFoundError``), and ``pageNo``/``numOfRows``
that FastAPI cannot parse (``RequestValidationError``).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tender_sync.domain.errors import NotFoundError, ValidationError
from tender_sync.entrypoints.http.error_responses import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

UNPROCESSABLE = 422
NOT_FOUND = 404


async def handle_rejected_search(request: Request, exc: ValidationError) -> JSONResponse:
    fields = [FieldError.model_validate(error) for error in exc.errors or []]
    logger.info(
        "Search rejected",
        extra={
            "path": request.url.path,
            "fields": [field.field for field in fields],
            "error_message": exc.message,
        },
    )
    return ErrorResponse(
        detail=exc.message, code=exc.error_code, errors=fields or None
    ).to_json_response(UNPROCESSABLE)


async def handle_missing_favorite_target(request: Request, exc: NotFoundError) -> JSONResponse:
    """404 for adding an unknown tender or removing a listing that is not a favorite."""
    logger.info(
        "Favorite target not found",
        extra={
            "method": request.method,
            "resource": exc.context.get("resource"),
            "identifier": exc.context.get("identifier"),
        },
    )
    return ErrorResponse(detail=exc.message, code=exc.error_code).to_json_response(NOT_FOUND)


async def handle_unparsable_paging(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    422 for query parameters that do not parse.

    Field names are the wire names (``pageNo``, ``numOfRows``) with the
    ``query`` location prefix dropped.
    """
    fields = [
        FieldError(field=str(error["loc"][-1]), message=error["msg"], code=error["type"])
        for error in exc.errors()
    ]
    logger.info(
        "Request parameters rejected",
        extra={"path": request.url.path, "fields": [field.field for field in fields]},
    )
    return ErrorResponse(
        detail="Invalid request parameters", code=ValidationError.error_code, errors=fields
    ).to_json_response(UNPROCESSABLE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_rejected_search)  # type: ignore[arg-type]
    app.add_exception_handler(NotFoundError, handle_missing_favorite_target)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_unparsable_paging)  # type: ignore[arg-type]
