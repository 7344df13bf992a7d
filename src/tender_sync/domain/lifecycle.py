"""Request lifecycle tracking with stale-response suppression.

One tracker per logical query stream. Every new request is stamped with a
monotonically increasing sequence number before it is issued; a completion is
only honored when it carries the latest issued number. Older completions are
reported as stale and must have no observable effect.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RequestStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RequestState:
    status: RequestStatus = RequestStatus.IDLE
    sequence: int = 0
    error: str | None = None


class RequestLifecycleTracker:
    """
    Idle -> Pending -> {Succeeded | Failed} -> Pending -> ...

    There is no retry and no cancellation; ``begin`` is only called on an
    explicit trigger, and superseded requests are neutralized by the
    sequence check in ``succeed``/``fail``.
    """

    def __init__(self) -> None:
        self._latest = 0
        self._state = RequestState()

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def latest_sequence(self) -> int:
        return self._latest

    def begin(self) -> int:
        """Transition to Pending and return the sequence number of the new request."""
        self._latest += 1
        self._state = RequestState(status=RequestStatus.PENDING, sequence=self._latest)
        return self._latest

    def is_current(self, sequence: int) -> bool:
        return sequence == self._latest

    def succeed(self, sequence: int) -> bool:
        """Mark the request as succeeded. Returns False (and changes nothing) if stale."""
        if not self.is_current(sequence):
            return False
        self._state = RequestState(status=RequestStatus.SUCCEEDED, sequence=sequence)
        return True

    def fail(self, sequence: int, message: str) -> bool:
        """Mark the request as failed. Returns False (and changes nothing) if stale."""
        if not self.is_current(sequence):
            return False
        self._state = RequestState(
            status=RequestStatus.FAILED, sequence=sequence, error=message
        )
        return True

    def reset(self) -> None:
        """Back to Idle. In-flight requests become stale."""
        self._latest += 1
        self._state = RequestState(sequence=self._latest)
