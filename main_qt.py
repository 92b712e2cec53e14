# main_qt.py
import sys

from PySide6.QtCore import QThreadPool
from PySide6.QtWidgets import QApplication
from sqlalchemy.orm import sessionmaker

from infra.db.base import database_url, make_session_factory
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from ui.planning.schedule_controller import ScheduleRecomputeController
from ui.planning.schedule_window import ScheduleWindow
from ui.shared.worker_services import make_schedule_builder, worker_service_scope


def build_runtime(
    db_url: str | None = None,
    pool: QThreadPool | None = None,
) -> tuple[sessionmaker, ScheduleRecomputeController]:
    url = db_url or database_url()
    run_migrations(db_url=url)
    session_factory = make_session_factory(url)
    controller = ScheduleRecomputeController(make_schedule_builder(session_factory), pool=pool)
    return session_factory, controller


def main():
    setup_logging()

    app = QApplication(sys.argv)
    session_factory, controller = build_runtime()

    def _load_quotes():
        with worker_service_scope(session_factory) as services:
            return services["quote_service"].list_quotes()

    window = ScheduleWindow(controller, _load_quotes)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
