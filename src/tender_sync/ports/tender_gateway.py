from __future__ import annotations

from abc import ABC, abstractmethod

from tender_sync.domain.query import TenderQuery
from tender_sync.domain.tender import TenderPage


class TenderGateway(ABC):
    """
    Port for the remote tender catalog.

    Contract:
        - The query is already encoded (endpoint + ordered parameters)
        - An absent payload is returned as ``TenderPage.empty(query.num_of_rows)``
        - The returned page descriptor reflects what the server reported,
          not what was requested
        - Transport and status failures raise ``FetchError`` subclasses
    """

    @abstractmethod
    async def fetch_page(self, query: TenderQuery) -> TenderPage:
        """
        Fetch one page of listings.

        Args:
            query: Encoded request descriptor

        Returns:
            TenderPage with listings and server pagination metadata

        Raises:
            NetworkError: If no response was received
            HttpError: If the server answered with a non-success status
        """
        ...
