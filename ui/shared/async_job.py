from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from core.services.scheduling import CancelToken, JobCancelledError


_T = TypeVar("_T")


class _JobSignals(QObject):
    success = Signal(object)
    failure = Signal(str)
    cancelled = Signal()


class _JobRunnable(QRunnable):
    def __init__(
        self,
        *,
        token: CancelToken,
        work: Callable[[CancelToken], object],
        signals: _JobSignals,
    ) -> None:
        super().__init__()
        self._token = token
        self._work = work
        self._signals = signals

    def run(self) -> None:
        try:
            result = self._work(self._token)
        except JobCancelledError:
            self._signals.cancelled.emit()
        except Exception as exc:  # noqa: BLE001
            self._signals.failure.emit(str(exc))
        else:
            if self._token.is_cancelled():
                self._signals.cancelled.emit()
            else:
                self._signals.success.emit(result)


class BackgroundJob(Generic[_T], QObject):
    """
    One unit of work on the global QThreadPool.

    Results come back on the thread that owns the job (the GUI thread), so the
    callbacks may touch widgets.
    """

    def __init__(
        self,
        *,
        work: Callable[[CancelToken], _T],
        on_success: Callable[[_T], None],
        on_error: Callable[[str], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
        on_finished: Callable[[], None] | None = None,
        token: CancelToken | None = None,
        pool: QThreadPool | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._work = work
        self._on_success = on_success
        self._on_error = on_error
        self._on_cancel = on_cancel
        self._on_finished = on_finished
        self._token = token or CancelToken()
        self._pool = pool or QThreadPool.globalInstance()
        self._signals: _JobSignals | None = None

    @property
    def token(self) -> CancelToken:
        return self._token

    def start(self) -> None:
        self._signals = _JobSignals()
        self._signals.success.connect(self._handle_success)
        self._signals.failure.connect(self._handle_failure)
        self._signals.cancelled.connect(self._handle_cancelled)
        self._pool.start(_JobRunnable(token=self._token, work=self._work, signals=self._signals))

    def cancel(self) -> None:
        self._token.cancel()

    def _handle_success(self, result: object) -> None:
        try:
            self._on_success(result)  # type: ignore[arg-type]
        finally:
            self._finish()

    def _handle_failure(self, message: str) -> None:
        try:
            if self._on_error is not None:
                self._on_error(message or "Operation failed.")
        finally:
            self._finish()

    def _handle_cancelled(self) -> None:
        try:
            if self._on_cancel is not None:
                self._on_cancel()
        finally:
            self._finish()

    def _finish(self) -> None:
        if self._on_finished is not None:
            self._on_finished()


__all__ = ["BackgroundJob"]
