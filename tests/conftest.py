from __future__ import annotations

from datetime import datetime

import pytest

from tender_sync.domain.tender import Tender


def make_tender(
    index: int,
    *,
    title: str | None = None,
    sido: str = "서울특별시",
    sgk: str = "강남구",
    emd: str = "역삼동",
    disposal_code: str = "0001",
    goods_price: int = 300_000_000,
    open_price: int = 270_000_000,
    begins: datetime = datetime(2024, 5, 1, 10, 0, 0),
    closes: datetime = datetime(2024, 5, 3, 17, 0, 0),
) -> Tender:
    return Tender(
        tender_id=1000 + index,
        management_no=f"2024-0000-{index:06d}",
        title=title or f"{sido} {sgk} {emd} 아파트 {index}",
        organization="매각" if disposal_code == "0001" else "임대",
        deadline=closes,
        pbct_no=8800000 + index,
        history_no="1",
        bid_number="0001",
        goods_name="아파트",
        announcement_date=begins,
        display_fields={
            "dpslMtdCd": disposal_code,
            "sido": sido,
            "sgk": sgk,
            "emd": emd,
            "goodsPrice": goods_price,
            "openPrice": open_price,
        },
    )


@pytest.fixture()
def tenders() -> list[Tender]:
    """Five Seoul tenders and three Busan tenders with varied prices and dates."""
    return [
        make_tender(1, goods_price=100_000_000, open_price=90_000_000),
        make_tender(2, goods_price=200_000_000, open_price=160_000_000),
        make_tender(3, title="서울특별시 마포구 서교동 근린생활시설", sgk="마포구", emd="서교동"),
        make_tender(4, disposal_code="0002", goods_price=500_000_000, open_price=500_000_000),
        make_tender(
            5,
            begins=datetime(2024, 6, 10, 10, 0, 0),
            closes=datetime(2024, 6, 12, 17, 0, 0),
        ),
        make_tender(6, sido="부산광역시", sgk="해운대구", emd="우동"),
        make_tender(7, sido="부산광역시", sgk="해운대구", emd="중동"),
        make_tender(8, sido="부산광역시", sgk="부산진구", emd="부전동", goods_price=900_000_000),
    ]


@pytest.fixture()
def tender_factory():
    """Builds a single tender; keyword arguments override locality, prices and dates."""
    return make_tender
