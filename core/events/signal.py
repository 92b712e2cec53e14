from __future__ import annotations

from threading import RLock
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Signal(Generic[T]):
    """
    Framework-agnostic signal/slot primitive for domain events.
    Keeps the core free of Qt; the UI layer subscribes plain callables.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []
        self._lock: RLock = RLock()

    def connect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)

    def disconnect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def emit(self, payload: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        stale: list[Callable[[T], None]] = []
        for callback in subscribers:
            try:
                callback(payload)
            except RuntimeError as exc:
                # bound methods of deleted QObjects raise "... already deleted"
                msg = str(exc).lower()
                if "already deleted" in msg or "has been deleted" in msg:
                    stale.append(callback)
                    continue
                raise
            except ReferenceError:
                stale.append(callback)
        if stale:
            with self._lock:
                for callback in stale:
                    if callback in self._subscribers:
                        self._subscribers.remove(callback)
