from __future__ import annotations

from abc import ABC, abstractmethod

from tender_sync.domain.tender import Tender


class FavoriteGateway(ABC):
    """
    Port for the remote, authoritative favorite store of the current user.

    Favorites are addressed by listing management number. Every method
    raises a ``FetchError`` subclass on failure.
    """

    @abstractmethod
    async def fetch_favorite_ids(self) -> list[str]:
        """Management numbers of all favorited listings."""
        ...

    @abstractmethod
    async def fetch_favorites(self) -> list[Tender]:
        """Full listing detail for every favorited listing."""
        ...

    @abstractmethod
    async def add_favorite(self, management_no: str) -> None: ...

    @abstractmethod
    async def remove_favorite(self, management_no: str) -> None: ...
