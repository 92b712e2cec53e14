from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Event, Lock
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JobCancelledError(RuntimeError):
    """Raised by background work when its ticket has been superseded."""


class CancelToken:
    def __init__(self) -> None:
        self._event = Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.is_cancelled():
            raise JobCancelledError("Recomputation superseded by a newer request.")


@dataclass(frozen=True)
class RecomputeTicket:
    generation: int
    token: CancelToken = field(default_factory=CancelToken, compare=False)


class RecomputeCoordinator(Generic[T]):
    """
    "Last completed fetch wins" gate for schedule recomputation.

    Each input change calls begin(); the previous ticket is cancelled. A result
    is accepted by publish() only while its ticket is still the latest one;
    stale results are discarded, never merged.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._generation = 0
        self._latest: Optional[RecomputeTicket] = None
        self._result: Optional[T] = None
        self._result_generation: Optional[int] = None

    def begin(self) -> RecomputeTicket:
        with self._lock:
            if self._latest is not None:
                self._latest.token.cancel()
            self._generation += 1
            ticket = RecomputeTicket(generation=self._generation)
            self._latest = ticket
        return ticket

    def is_current(self, ticket: RecomputeTicket) -> bool:
        with self._lock:
            return self._latest is not None and self._latest.generation == ticket.generation

    def publish(self, ticket: RecomputeTicket, result: T) -> bool:
        with self._lock:
            stale = self._latest is None or ticket.generation != self._latest.generation
            if stale or ticket.token.is_cancelled():
                logger.debug("Discarding stale schedule result (generation %s)", ticket.generation)
                return False
            self._result = result
            self._result_generation = ticket.generation
            return True

    def current(self) -> Optional[T]:
        with self._lock:
            return self._result

    @property
    def result_generation(self) -> Optional[int]:
        with self._lock:
            return self._result_generation


__all__ = [
    "CancelToken",
    "JobCancelledError",
    "RecomputeCoordinator",
    "RecomputeTicket",
]
