from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.models import Quote
from core.services.scheduling import QuoteSchedule
from ui.planning.schedule_controller import ScheduleRecomputeController

SCHEDULE_COLUMNS = ["Plan", "Resource", "Item", "Hours", "Start day", "End day", "Days"]

ScheduleRow = Tuple[str, str, str, float, int, int, int]


def schedule_rows(schedule: QuoteSchedule) -> List[ScheduleRow]:
    """Flat table rows: plans in schedule order, then resources, then tasks."""
    rows: List[ScheduleRow] = []
    for plan in schedule.gantt_by_plan.values():
        for resource in plan.resources:
            for task in resource.tasks:
                rows.append((
                    plan.plan_name,
                    resource.resource_name,
                    task.item_name or task.task_key,
                    task.hours_required,
                    task.start_day,
                    task.end_day,
                    task.duration_days,
                ))
    return rows


class ScheduleWindow(QMainWindow):
    def __init__(
        self,
        controller: ScheduleRecomputeController,
        load_quotes: Callable[[], Sequence[Quote]],
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._controller = controller
        self._load_quotes = load_quotes

        self.setWindowTitle("Training Quote Planner")
        self._setup_ui()

        self._controller.schedule_ready.connect(self._show_schedule)
        self._controller.failed.connect(self._show_error)
        self.reload_quotes()

    def _setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)

        toolbar = QHBoxLayout()
        self.quote_combo = QComboBox()
        self.btn_reload = QPushButton("Reload quotes")
        toolbar.addWidget(QLabel("Quote:"))
        toolbar.addWidget(self.quote_combo, 1)
        toolbar.addWidget(self.btn_reload)
        layout.addLayout(toolbar)

        self.table = QTableWidget(0, len(SCHEDULE_COLUMNS))
        self.table.setHorizontalHeaderLabels(SCHEDULE_COLUMNS)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        layout.addWidget(self.table)

        self.setCentralWidget(central)
        self.resize(900, 520)

        self.quote_combo.currentIndexChanged.connect(self._on_quote_selected)
        self.btn_reload.clicked.connect(self.reload_quotes)

    def reload_quotes(self) -> None:
        self.quote_combo.blockSignals(True)
        self.quote_combo.clear()
        for quote in self._load_quotes():
            label = f"{quote.name} ({quote.client_name})" if quote.client_name else quote.name
            self.quote_combo.addItem(label, quote.id)
        self.quote_combo.blockSignals(False)
        self._on_quote_selected(self.quote_combo.currentIndex())

    def _on_quote_selected(self, index: int) -> None:
        quote_id: Optional[str] = self.quote_combo.itemData(index) if index >= 0 else None
        self.table.setRowCount(0)
        self._controller.set_quote(quote_id)

    def _show_schedule(self, schedule: QuoteSchedule) -> None:
        rows = schedule_rows(schedule)
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                self.table.setItem(r, c, QTableWidgetItem(str(value)))
        self.statusBar().showMessage(f"{len(rows)} scheduled task(s)")

    def _show_error(self, message: str) -> None:
        self.statusBar().showMessage(f"Schedule failed: {message}")

    def closeEvent(self, event):
        self._controller.shutdown()
        super().closeEvent(event)


__all__ = ["SCHEDULE_COLUMNS", "ScheduleWindow", "schedule_rows"]
