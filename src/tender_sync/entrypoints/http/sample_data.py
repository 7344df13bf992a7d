"""
Deterministic sample catalog for the reference tender service.

Features:
- Deterministic: fixed seed -> same dataset every run
- Realism-lite: appraisal price by usage band, bid price discounted per round
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from tender_sync.domain.tender import Tender

# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_TENDERS = 60

# ==============================================================================
# Catalog Data
# ==============================================================================

# Locality: sido -> sgk -> emd
LOCALITIES = {
    "서울특별시": {
        "강남구": ["역삼동", "삼성동", "대치동"],
        "마포구": ["서교동", "합정동"],
        "송파구": ["잠실동", "문정동"],
    },
    "부산광역시": {
        "해운대구": ["우동", "중동"],
        "부산진구": ["부전동", "전포동"],
    },
    "경기도": {
        "성남시": ["정자동", "서현동"],
        "수원시": ["인계동", "매탄동"],
    },
}

# Usage band -> appraisal price range (KRW)
USAGES = {
    "아파트": (300_000_000, 1_500_000_000),
    "근린생활시설": (200_000_000, 900_000_000),
    "토지": (50_000_000, 600_000_000),
    "차량": (3_000_000, 40_000_000),
}

# Disposal method code -> name shown as the organization column
DISPOSAL_METHODS = {"0001": "매각", "0002": "임대"}

BASE_DATE = datetime(2024, 5, 1, 10, 0, 0)


def generate_tender(index: int, rng: random.Random) -> Tender:
    """Generate a single tender with consistent locality and pricing."""
    sido = rng.choice(list(LOCALITIES))
    sgk = rng.choice(list(LOCALITIES[sido]))
    emd = rng.choice(LOCALITIES[sido][sgk])

    usage = rng.choice(list(USAGES))
    low, high = USAGES[usage]
    goods_price = rng.randrange(low, high, 1_000_000)

    # Each failed round lowers the minimum bid by 10%
    rounds = rng.randint(0, 4)
    open_price = int(goods_price * (1 - 0.1 * rounds)) // 1000 * 1000

    disposal_code = rng.choices(list(DISPOSAL_METHODS), weights=[4, 1], k=1)[0]

    begins = BASE_DATE + timedelta(days=rng.randint(0, 60))
    closes = begins + timedelta(days=rng.randint(1, 3), hours=7)

    return Tender(
        tender_id=202400000000 + index,
        management_no=f"2024-{index // 100:04d}-{index:06d}",
        title=f"{sido} {sgk} {emd} {usage}",
        organization=DISPOSAL_METHODS[disposal_code],
        deadline=closes,
        pbct_no=8800000 + index,
        history_no=str(rounds + 1),
        bid_number=f"{rounds + 1:04d}",
        goods_name=usage,
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


def sample_tenders(num_tenders: int = NUM_TENDERS, seed: int = RANDOM_SEED) -> list[Tender]:
    """
    Build the sample catalog.

    Args:
        num_tenders: Number of tenders to generate
        seed: Random seed for deterministic results
    """
    rng = random.Random(seed)
    return [generate_tender(index, rng) for index in range(1, num_tenders + 1)]
