from __future__ import annotations

import logging
from dataclasses import dataclass

from tender_sync.domain.errors import FetchError
from tender_sync.domain.lifecycle import RequestLifecycleTracker, RequestStatus
from tender_sync.domain.pagination import DEFAULT_WINDOW_SIZE, PageControls
from tender_sync.domain.query import TenderQuery, encode_query
from tender_sync.domain.results import ResultStore
from tender_sync.domain.tender import PageDescriptor, PageRequest, Tender, TenderFilters
from tender_sync.ports.tender_gateway import TenderGateway

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred while searching tenders."


@dataclass(frozen=True, slots=True)
class SearchState:
    """Read-only snapshot of the search stream for rendering."""

    status: RequestStatus
    sequence: int
    tenders: tuple[Tender, ...]
    page: PageDescriptor
    controls: PageControls
    error: str | None = None
    filters: TenderFilters = TenderFilters()

    @property
    def is_loading(self) -> bool:
        return self.status is RequestStatus.PENDING


class SearchTenders:
    """
    The search stream: criteria and page changes in, committed pages out.

    Every trigger issues a new request stamped by the lifecycle tracker.
    Only the latest request may touch the result store; earlier responses
    (and earlier failures) are dropped when they arrive. Fetch failures are
    recovered here: the last committed page stays and the error slot is set.

    See: SearchState for what the UI reads back.
    """

    def __init__(
        self,
        tender_gateway: TenderGateway,
        page_size: int = 10,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        self._gateway = tender_gateway
        self._window_size = window_size
        self._tracker = RequestLifecycleTracker()
        self._store = ResultStore(num_of_rows=page_size)
        self._filters = TenderFilters()
        self._page_request = PageRequest(page_no=1, num_of_rows=page_size)

    @property
    def state(self) -> SearchState:
        tracker_state = self._tracker.state
        return SearchState(
            status=tracker_state.status,
            sequence=tracker_state.sequence,
            tenders=self._store.tenders,
            page=self._store.page,
            controls=self._store.controls(self._window_size),
            error=self._store.error,
            filters=self._filters,
        )

    async def load_initial(self) -> SearchState:
        """First page without criteria."""
        return await self.submit(TenderFilters())

    async def submit(self, filters: TenderFilters) -> SearchState:
        """New criteria always start from page 1."""
        self._filters = filters
        self._page_request = PageRequest(page_no=1, num_of_rows=self._page_request.num_of_rows)
        return await self._run()

    async def go_to_page(self, page_no: int) -> SearchState:
        """
        Fetch another page of the last submitted criteria.

        The page number is clamped to the known page range before encoding.
        """
        last_page = max(self._store.page.total_pages, 1)
        clamped = min(max(page_no, 1), last_page)
        self._page_request = PageRequest(
            page_no=clamped, num_of_rows=self._page_request.num_of_rows
        )
        return await self._run()

    async def change_page_size(self, num_of_rows: int) -> SearchState:
        """Keep the current page; the server clamps it if it no longer exists."""
        self._page_request = PageRequest(
            page_no=self._store.page.page_no, num_of_rows=num_of_rows
        )
        return await self._run()

    async def _run(self) -> SearchState:
        query = encode_query(self._filters, self._page_request)
        sequence = self._tracker.begin()
        logger.info(
            "Search issued",
            extra={"sequence": sequence, "path": query.path()},
        )

        try:
            page = await self._gateway.fetch_page(query)
        except FetchError as exc:
            self._on_failure(sequence, query, exc)
            return self.state

        if not self._tracker.succeed(sequence):
            logger.debug(
                "Discarding stale search response",
                extra={"sequence": sequence, "latest": self._tracker.latest_sequence},
            )
            return self.state

        self._store.commit(page)
        # Follow the server's view so the next page click starts from it.
        self._page_request = PageRequest(
            page_no=page.page.page_no, num_of_rows=page.page.num_of_rows
        )
        logger.info(
            "Search committed",
            extra={
                "sequence": sequence,
                "page_no": page.page.page_no,
                "total_count": page.page.total_count,
            },
        )
        return self.state

    def _on_failure(self, sequence: int, query: TenderQuery, exc: FetchError) -> None:
        message = exc.message or DEFAULT_ERROR_MESSAGE
        if not self._tracker.fail(sequence, message):
            logger.debug(
                "Discarding stale search failure",
                extra={"sequence": sequence, "latest": self._tracker.latest_sequence},
            )
            return

        self._store.record_error(message)
        logger.warning(
            "Search failed",
            extra={
                "sequence": sequence,
                "path": query.path(),
                "error_code": exc.error_code,
            },
        )
