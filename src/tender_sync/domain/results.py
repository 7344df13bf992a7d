from __future__ import annotations

from tender_sync.domain.pagination import DEFAULT_WINDOW_SIZE, PageControls, page_controls
from tender_sync.domain.tender import PageDescriptor, Tender, TenderPage


class ResultStore:
    """
    Last committed page of listings for the search stream.

    Only the search stream writes here. A failure never clears the committed
    page; it only fills the error slot, which the next commit clears.
    """

    def __init__(self, num_of_rows: int) -> None:
        self._tenders: tuple[Tender, ...] = ()
        self._page = PageDescriptor(page_no=1, num_of_rows=num_of_rows, total_count=0)
        self._error: str | None = None

    @property
    def tenders(self) -> tuple[Tender, ...]:
        return self._tenders

    @property
    def page(self) -> PageDescriptor:
        return self._page

    @property
    def error(self) -> str | None:
        return self._error

    def commit(self, result: TenderPage) -> None:
        # Page number and size come from the server, not from the request.
        self._tenders = result.tenders
        self._page = result.page
        self._error = None

    def record_error(self, message: str) -> None:
        self._error = message

    def controls(self, window_size: int = DEFAULT_WINDOW_SIZE) -> PageControls:
        return page_controls(self._page.page_no, self._page.total_pages, window_size)
