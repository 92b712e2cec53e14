from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable

from sqlalchemy.orm import sessionmaker

from core.services.scheduling import CancelToken, QuoteSchedule
from infra.services import build_service_dict


@contextmanager
def worker_service_scope(session_factory: sessionmaker):
    """Fresh session and service graph for one background job; sessions never cross threads."""
    session = session_factory()
    try:
        services: dict[str, Any] = build_service_dict(session)
        yield services
    finally:
        session.close()


def make_schedule_builder(session_factory: sessionmaker) -> Callable[[str, CancelToken], QuoteSchedule]:
    def _build(quote_id: str, token: CancelToken) -> QuoteSchedule:
        with worker_service_scope(session_factory) as services:
            return services["schedule_service"].build_quote_schedule(quote_id, token=token)

    return _build


__all__ = ["make_schedule_builder", "worker_service_scope"]
