from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal

from core.events.domain_events import domain_events
from core.services.scheduling import CancelToken, QuoteSchedule, RecomputeCoordinator, RecomputeTicket
from infra.operational_support import bind_trace_id, create_trace_id
from ui.shared.async_job import BackgroundJob

logger = logging.getLogger(__name__)

ScheduleBuilder = Callable[[str, CancelToken], QuoteSchedule]


class ScheduleRecomputeController(QObject):
    """
    Keeps the Gantt view of one quote in sync with its inputs.

    Every quote/catalog change starts a fresh fetch+compute on the thread
    pool. Only the result of the latest request reaches schedule_ready; older
    runs are cancelled and their results dropped.
    """

    schedule_ready = Signal(object)  # QuoteSchedule
    failed = Signal(str)

    def __init__(
        self,
        build_schedule: ScheduleBuilder,
        parent: QObject | None = None,
        pool: QThreadPool | None = None,
    ) -> None:
        super().__init__(parent)
        self._build_schedule = build_schedule
        self._pool = pool
        self._coordinator: RecomputeCoordinator[QuoteSchedule] = RecomputeCoordinator()
        self._quote_id: Optional[str] = None
        self._jobs: list[BackgroundJob] = []

        domain_events.quote_changed.connect(self._on_quote_changed)
        domain_events.catalog_changed.connect(self._on_catalog_changed)

    @property
    def quote_id(self) -> Optional[str]:
        return self._quote_id

    def current_schedule(self) -> Optional[QuoteSchedule]:
        return self._coordinator.current()

    def set_quote(self, quote_id: Optional[str]) -> None:
        self._quote_id = quote_id
        self.request_recompute()

    def request_recompute(self) -> None:
        quote_id = self._quote_id
        if not quote_id:
            return

        ticket = self._coordinator.begin()
        trace_id = create_trace_id("sched")
        build = self._build_schedule

        def _work(token: CancelToken) -> QuoteSchedule:
            with bind_trace_id(trace_id):
                logger.info("Recomputing schedule for quote %s (generation %s)", quote_id, ticket.generation)
                return build(quote_id, token)

        job: BackgroundJob[QuoteSchedule] | None = None

        def _forget() -> None:
            if job in self._jobs:
                self._jobs.remove(job)

        job = BackgroundJob(
            work=_work,
            on_success=lambda schedule: self._publish(ticket, schedule),
            on_error=lambda message: self._fail(ticket, message),
            on_finished=_forget,
            token=ticket.token,
            pool=self._pool,
            parent=self,
        )
        self._jobs.append(job)
        job.start()

    def shutdown(self) -> None:
        domain_events.quote_changed.disconnect(self._on_quote_changed)
        domain_events.catalog_changed.disconnect(self._on_catalog_changed)
        for job in list(self._jobs):
            job.cancel()

    def _publish(self, ticket: RecomputeTicket, schedule: QuoteSchedule) -> None:
        if self._coordinator.publish(ticket, schedule):
            self.schedule_ready.emit(schedule)

    def _fail(self, ticket: RecomputeTicket, message: str) -> None:
        if self._coordinator.is_current(ticket):
            logger.error("Schedule recomputation failed: %s", message)
            self.failed.emit(message)

    def _on_quote_changed(self, quote_id: str) -> None:
        if quote_id == self._quote_id:
            self.request_recompute()

    def _on_catalog_changed(self, _entity: str) -> None:
        self.request_recompute()


__all__ = ["ScheduleRecomputeController", "ScheduleBuilder"]
