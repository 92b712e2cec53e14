"""Reporting API wrappers around renderer classes."""

from pathlib import Path

from core.reporting.contexts import QuoteReportContext
from core.reporting.renderers.excel import ExcelReportRenderer
from core.reporting.renderers.pdf import PdfReportRenderer
from core.services.scheduling import QuoteScheduleService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def build_report_context(schedule_service: QuoteScheduleService, quote_id: str) -> QuoteReportContext:
    quote = schedule_service.get_quote(quote_id)
    schedule = schedule_service.build_quote_schedule(quote_id)
    costs = schedule_service.build_cost_summaries(quote_id, schedule=schedule)
    topics = schedule_service.list_quote_topics(quote_id, plan_ids=list(schedule.gantt_by_plan))
    return QuoteReportContext(quote=quote, schedule=schedule, costs=costs, topics=topics)


def generate_excel_report(
    schedule_service: QuoteScheduleService,
    quote_id: str,
    output_path: str | Path,
) -> Path:
    ctx = build_report_context(schedule_service, quote_id)
    return ExcelReportRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_pdf_report(
    schedule_service: QuoteScheduleService,
    quote_id: str,
    output_path: str | Path,
) -> Path:
    ctx = build_report_context(schedule_service, quote_id)
    return PdfReportRenderer().render(ctx, _ensure_parent(Path(output_path)))
