from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping

from tender_sync.domain.errors import PagingValidationError

FilterValue = str | int | Decimal | date | None


@dataclass(frozen=True, slots=True)
class Tender:
    """One tender/auction listing as returned by the catalog.

    Immutable; a new page replaces listings wholesale.
    """

    tender_id: int | None
    management_no: str | None
    title: str
    organization: str | None = None
    deadline: datetime | None = None
    pbct_no: int | None = None
    history_no: str | None = None
    bid_number: str | None = None
    goods_name: str | None = None
    announcement_date: datetime | None = None
    display_fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TenderFilters:
    """Search criteria. ``None`` means "no constraint".

    Text values are stripped on construction, so whitespace-only input is
    indistinguishable from an absent key.
    """

    title: FilterValue = None
    disposal_method: FilterValue = None
    sido: FilterValue = None
    sgk: FilterValue = None
    emd: FilterValue = None
    appraisal_price_min: FilterValue = None
    appraisal_price_max: FilterValue = None
    bid_price_min: FilterValue = None
    bid_price_max: FilterValue = None
    auction_start: FilterValue = None
    auction_end: FilterValue = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str):
                value = value.strip() or None
                object.__setattr__(self, f.name, value)

    def is_empty(self) -> bool:
        return not self.as_dict()

    def as_dict(self) -> dict[str, FilterValue]:
        """Only the constrained dimensions, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True, slots=True)
class PageRequest:
    page_no: int = 1
    num_of_rows: int = 10

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page_no < 1:
            raise PagingValidationError("page_no must be >= 1", page_no=self.page_no)
        if self.num_of_rows <= 0:
            raise PagingValidationError(
                "num_of_rows must be > 0", num_of_rows=self.num_of_rows
            )


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    page_no: int
    num_of_rows: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.num_of_rows)


@dataclass(frozen=True, slots=True)
class TenderPage:
    """A page of listings together with the pagination metadata the server reported."""

    tenders: tuple[Tender, ...]
    page: PageDescriptor

    @classmethod
    def empty(cls, num_of_rows: int) -> TenderPage:
        """Stand-in for an absent payload: no listings, page 1, zero total."""
        return cls(
            tenders=(),
            page=PageDescriptor(page_no=1, num_of_rows=num_of_rows, total_count=0),
        )
