"""Favorite set with optimistic toggles.

Each toggle is recorded as an intent that captures the pre-toggle membership.
The toggle is applied at once; the intent is later either confirmed or rolled
back. Reconciliation is per identifier and honors only the most recent intent
for that identifier, so a late failure of a superseded request cannot undo a
newer state.

Invariant: every key in the detail mapping is also in the identifier set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from tender_sync.domain.tender import Tender


class IntentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"


@dataclass(frozen=True, slots=True)
class FavoriteToggleIntent:
    management_no: str
    previous_membership: bool
    requested_membership: bool
    sequence: int
    # Detail evicted by an optimistic removal, restored on rollback.
    previous_detail: Tender | None = None


class FavoriteSet:
    def __init__(self) -> None:
        self._ids: set[str] = set()
        self._details: dict[str, Tender] = {}
        self._latest_intents: dict[str, FavoriteToggleIntent] = {}
        self._statuses: dict[str, IntentStatus] = {}
        self._sequence = 0

    def __contains__(self, management_no: object) -> bool:
        return management_no in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._ids)

    @property
    def details(self) -> dict[str, Tender]:
        return dict(self._details)

    def replace_ids(self, management_nos: Iterable[str]) -> None:
        """Replace the identifier set wholesale (authoritative server state)."""
        self._ids = set(management_nos)
        self._details = {
            key: tender for key, tender in self._details.items() if key in self._ids
        }

    def replace_details(self, tenders: Iterable[Tender]) -> None:
        """Replace the detail mapping, keeping only records whose key is favorited."""
        self._details = {
            tender.management_no: tender
            for tender in tenders
            if tender.management_no is not None and tender.management_no in self._ids
        }

    def apply_toggle(self, management_no: str, currently_favorited: bool) -> FavoriteToggleIntent:
        """
        Flip membership immediately and record the intent.

        Args:
            management_no: Listing key
            currently_favorited: Membership as shown to the user; the request
                becomes the opposite of it

        Returns:
            The recorded intent, to be passed to ``confirm`` or ``roll_back``
        """
        self._sequence += 1
        requested = not currently_favorited
        previous_detail = None

        if requested:
            self._ids.add(management_no)
        else:
            self._ids.discard(management_no)
            previous_detail = self._details.pop(management_no, None)

        intent = FavoriteToggleIntent(
            management_no=management_no,
            previous_membership=currently_favorited,
            requested_membership=requested,
            sequence=self._sequence,
            previous_detail=previous_detail,
        )
        self._latest_intents[management_no] = intent
        self._statuses[management_no] = IntentStatus.PENDING
        return intent

    def is_latest(self, intent: FavoriteToggleIntent) -> bool:
        latest = self._latest_intents.get(intent.management_no)
        return latest is not None and latest.sequence == intent.sequence

    def confirm(self, intent: FavoriteToggleIntent) -> bool:
        """Accept the optimistic state. Returns False if the intent was superseded."""
        if not self.is_latest(intent):
            return False
        del self._latest_intents[intent.management_no]
        self._statuses[intent.management_no] = IntentStatus.CONFIRMED
        return True

    def roll_back(self, intent: FavoriteToggleIntent) -> bool:
        """Restore pre-toggle membership for this identifier only.

        Returns False if the intent was superseded; nothing changes then.
        """
        if not self.is_latest(intent):
            return False

        key = intent.management_no
        if intent.previous_membership:
            self._ids.add(key)
            if intent.previous_detail is not None:
                self._details[key] = intent.previous_detail
        else:
            self._ids.discard(key)
            self._details.pop(key, None)

        del self._latest_intents[key]
        self._statuses[key] = IntentStatus.ROLLED_BACK
        return True

    def status_of(self, management_no: str) -> IntentStatus | None:
        return self._statuses.get(management_no)

    def pending_intent(self, management_no: str) -> FavoriteToggleIntent | None:
        return self._latest_intents.get(management_no)

    def clear(self) -> None:
        # Outstanding intents become superseded; their responses are ignored.
        self._ids.clear()
        self._details.clear()
        self._latest_intents.clear()
        self._statuses.clear()
