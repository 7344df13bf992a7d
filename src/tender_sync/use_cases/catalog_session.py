from __future__ import annotations

import asyncio
import logging

from tender_sync.use_cases.favorite_sync import FavoriteSyncEngine
from tender_sync.use_cases.search_tenders import SearchTenders

logger = logging.getLogger(__name__)


class CatalogSession:
    """
    One user's session over the catalog.

    Wires the two independent streams together only at session start and
    logout; otherwise they never wait on each other.
    """

    def __init__(self, search: SearchTenders, favorites: FavoriteSyncEngine) -> None:
        self.search = search
        self.favorites = favorites

    async def start(self) -> None:
        """Initial page and favorites, fetched concurrently."""
        await asyncio.gather(self.search.load_initial(), self.favorites.refresh())
        logger.info(
            "Catalog session started",
            extra={
                "total_count": self.search.state.page.total_count,
                "favorites": len(self.favorites.favorite_ids),
            },
        )

    def logout(self) -> None:
        self.favorites.clear()
        logger.info("Catalog session ended")

    def is_favorite(self, management_no: str | None) -> bool:
        return management_no is not None and self.favorites.is_favorite(management_no)
