"""Wire models for the tender service JSON payloads (camelCase on the wire)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

WIRE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TenderDTO(BaseModel):
    """One listing. Unrecognized keys are kept as extras (display fields)."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "tenderId": 202401230001,
                "pbctNo": 8812345,
                "cltrHstrNo": "3",
                "cltrMnmtNo": "2024-0123-004567",
                "tenderTitle": "서울특별시 강남구 역삼동 근린생활시설",
                "organization": "매각",
                "bidNumber": "0001",
                "goodsName": "근린생활시설",
                "announcementDate": "2024-05-01 10:00:00",
                "deadline": "2024-05-03 17:00:00",
            }
        },
    )

    tender_id: int | None = Field(default=None, alias="tenderId")
    pbct_no: int | None = Field(default=None, alias="pbctNo")
    cltr_hstr_no: str | None = Field(default=None, alias="cltrHstrNo")
    cltr_mnmt_no: str | None = Field(default=None, alias="cltrMnmtNo")
    tender_title: str = Field(default="", alias="tenderTitle")
    organization: str | None = None
    bid_number: str | None = Field(default=None, alias="bidNumber")
    goods_name: str | None = Field(default=None, alias="goodsName")
    announcement_date: datetime | None = Field(default=None, alias="announcementDate")
    deadline: datetime | None = None

    @field_validator("tender_title", mode="before")
    @classmethod
    def blank_missing_title(cls, value: Any) -> Any:
        # Listings without a CLTR_NM tag arrive with a null title.
        return "" if value is None else value

    @field_validator("announcement_date", "deadline", mode="before")
    @classmethod
    def parse_wire_datetime(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return datetime.strptime(value, WIRE_DATETIME_FORMAT)
            except ValueError:
                return value  # let pydantic try ISO 8601
        return value

    @field_serializer("announcement_date", "deadline")
    def serialize_wire_datetime(self, value: datetime | None) -> str | None:
        return value.strftime(WIRE_DATETIME_FORMAT) if value else None


class PagedTenderResponseDTO(BaseModel):
    """Search/list response. Every field may be missing; the mapper fills defaults."""

    model_config = ConfigDict(populate_by_name=True)

    tenders: list[TenderDTO] | None = None
    total_count: int | None = Field(default=None, alias="totalCount")
    page_no: int | None = Field(default=None, alias="pageNo")
    num_of_rows: int | None = Field(default=None, alias="numOfRows")
