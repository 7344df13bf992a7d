from pydantic import BaseModel, Field


class TenderSearchQueryDTO(BaseModel):
    """Query parameters of ``GET /api/tenders/search`` (wire names)."""

    cltrNm: str | None = Field(
        default=None,
        description="Title substring (case-insensitive)",
        examples=["아파트"],
    )
    dpslMtdCd: str | None = Field(
        default=None,
        description="Disposal method code (0001 sale, 0002 lease)",
        examples=["0001"],
    )
    sido: str | None = Field(default=None, description="Province / metropolitan city", examples=["서울특별시"])
    sgk: str | None = Field(default=None, description="City / district", examples=["강남구"])
    emd: str | None = Field(default=None, description="Town / neighborhood", examples=["역삼동"])
    goodsPriceFrom: str | None = Field(
        default=None, description="Minimum appraisal price (inclusive)", examples=["100000000"]
    )
    goodsPriceTo: str | None = Field(
        default=None, description="Maximum appraisal price (inclusive)", examples=["500000000"]
    )
    openPriceFrom: str | None = Field(
        default=None, description="Minimum bid price (inclusive)"
    )
    openPriceTo: str | None = Field(
        default=None, description="Maximum bid price (inclusive)"
    )
    pbctBegnDtm: str | None = Field(
        default=None, description="Auction start date, YYYYMMDD", examples=["20240501"]
    )
    pbctClsDtm: str | None = Field(
        default=None, description="Auction end date, YYYYMMDD", examples=["20240630"]
    )
    pageNo: int = Field(default=1, description="Page number (1-based)", ge=1)
    numOfRows: int = Field(
        default=10, description="Rows per page", ge=1, le=1000
    )


class TenderListQueryDTO(BaseModel):
    """Query parameters of ``GET /api/tenders``."""

    pageNo: int = Field(default=1, description="Page number (1-based)", ge=1)
    numOfRows: int = Field(
        default=10, description="Rows per page", ge=1, le=1000
    )
