"""Favorites stream: keeps the local favorite set consistent with the remote store."""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping

from tender_sync.domain.errors import FetchError
from tender_sync.domain.favorites import FavoriteSet, FavoriteToggleIntent, IntentStatus
from tender_sync.domain.lifecycle import RequestLifecycleTracker, RequestStatus
from tender_sync.domain.tender import Tender
from tender_sync.ports.favorite_gateway import FavoriteGateway

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load favorite tenders."
DETAILS_ERROR_MESSAGE = "Failed to load favorite tender details."
TOGGLE_ERROR_MESSAGE = "Failed to update favorite tender."


class FavoriteSyncEngine:
    """
    Owns the favorite set of the current user.

    - Loads are authoritative and replace local state wholesale
    - Toggles are optimistic: applied synchronously at call time, then
      confirmed or rolled back per identifier when the remote call resolves
    - Errors are recovered here, in separate slots for id loading, detail
      loading and toggling
    """

    def __init__(self, favorite_gateway: FavoriteGateway) -> None:
        self._gateway = favorite_gateway
        self._favorites = FavoriteSet()
        self._ids_tracker = RequestLifecycleTracker()
        self._details_tracker = RequestLifecycleTracker()
        self.toggle_error: str | None = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def favorite_ids(self) -> frozenset[str]:
        return self._favorites.ids

    @property
    def favorite_details(self) -> Mapping[str, Tender]:
        return self._favorites.details

    @property
    def load_status(self) -> RequestStatus:
        return self._ids_tracker.state.status

    @property
    def details_status(self) -> RequestStatus:
        return self._details_tracker.state.status

    @property
    def load_error(self) -> str | None:
        return self._ids_tracker.state.error

    @property
    def details_error(self) -> str | None:
        return self._details_tracker.state.error

    def is_favorite(self, management_no: str) -> bool:
        return management_no in self._favorites

    def status_of(self, management_no: str) -> IntentStatus | None:
        return self._favorites.status_of(management_no)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load_favorite_ids(self) -> bool:
        """
        Replace the local set with the server's.

        Returns:
            True if the set was replaced; False on failure (set untouched)
            or when a newer load superseded this one
        """
        sequence = self._ids_tracker.begin()
        try:
            ids = await self._gateway.fetch_favorite_ids()
        except FetchError as exc:
            if self._ids_tracker.fail(sequence, exc.message or LOAD_ERROR_MESSAGE):
                logger.warning(
                    "Loading favorite ids failed",
                    extra={"sequence": sequence, "error_code": exc.error_code},
                )
            return False

        if not self._ids_tracker.succeed(sequence):
            logger.debug("Discarding stale favorite id load", extra={"sequence": sequence})
            return False

        self._favorites.replace_ids(ids)
        logger.info("Favorite ids loaded", extra={"count": len(self._favorites)})
        return True

    async def load_favorite_details(self) -> bool:
        """
        Fetch full listings for the favorited identifiers.

        Runs only after a successful id load. An empty set resolves to an
        empty mapping without any network call.

        Returns:
            True if the detail mapping was replaced
        """
        if self._ids_tracker.state.status is not RequestStatus.SUCCEEDED:
            logger.debug(
                "Skipping favorite details until ids are loaded",
                extra={"load_status": self._ids_tracker.state.status.value},
            )
            return False

        sequence = self._details_tracker.begin()
        if not self._favorites.ids:
            self._favorites.replace_details([])
            self._details_tracker.succeed(sequence)
            return True

        try:
            tenders = await self._gateway.fetch_favorites()
        except FetchError as exc:
            if self._details_tracker.fail(sequence, DETAILS_ERROR_MESSAGE):
                logger.warning(
                    "Loading favorite details failed",
                    extra={"sequence": sequence, "error_code": exc.error_code},
                )
            return False

        if not self._details_tracker.succeed(sequence):
            logger.debug("Discarding stale favorite details", extra={"sequence": sequence})
            return False

        self._favorites.replace_details(tenders)
        return True

    async def refresh(self) -> bool:
        """Ids, then details."""
        if not await self.load_favorite_ids():
            return False
        return await self.load_favorite_details()

    # ------------------------------------------------------------------
    # Toggling
    # ------------------------------------------------------------------

    def toggle_favorite(self, management_no: str, currently_favorited: bool) -> asyncio.Task[bool]:
        """
        Flip membership now and reconcile with the remote store later.

        The local mutation happens before this method returns. The add or
        remove request is scheduled as a task on the running loop, so it is
        issued even when the caller never awaits the result.

        Args:
            management_no: Listing key
            currently_favorited: True removes the favorite, False adds it

        Returns:
            Task resolving to True when the server confirmed the change,
            False when it failed
        """
        intent = self._favorites.apply_toggle(management_no, currently_favorited)
        logger.info(
            "Favorite toggled",
            extra={
                "management_no": management_no,
                "requested": intent.requested_membership,
                "sequence": intent.sequence,
            },
        )
        return asyncio.create_task(self._reconcile(intent))

    async def _reconcile(self, intent: FavoriteToggleIntent) -> bool:
        try:
            if intent.requested_membership:
                await self._gateway.add_favorite(intent.management_no)
            else:
                await self._gateway.remove_favorite(intent.management_no)
        except FetchError as exc:
            if self._favorites.roll_back(intent):
                self.toggle_error = exc.message or TOGGLE_ERROR_MESSAGE
                logger.warning(
                    "Favorite toggle rolled back",
                    extra={
                        "management_no": intent.management_no,
                        "sequence": intent.sequence,
                        "error_code": exc.error_code,
                    },
                )
            else:
                logger.debug(
                    "Ignoring failure of superseded favorite toggle",
                    extra={"management_no": intent.management_no, "sequence": intent.sequence},
                )
            return False

        if self._favorites.confirm(intent):
            self.toggle_error = None
        return True

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Forget everything (logout). In-flight responses become no-ops."""
        self._favorites.clear()
        self._ids_tracker.reset()
        self._details_tracker.reset()
        self.toggle_error = None
