"""Error bodies of the reference tender service.

``HttpError`` on the client side takes its server message from ``detail``.
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """One rejected search parameter."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """``detail`` and ``code``; ``errors`` only when single parameters were rejected."""

    detail: str
    code: str
    errors: list[FieldError] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Favorite with identifier '2024-0001-000123' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "auction_start",
                            "message": "Must be YYYYMMDD",
                            "code": "INVALID_DATE",
                        }
                    ],
                },
            ]
        }
    )

    def to_json_response(self, status_code: int) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=self.model_dump(exclude_none=True))
