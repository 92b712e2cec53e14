from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.reporting.contexts import QuoteReportContext
from core.services.scheduling import is_working_day


def _sheet_title(name: str) -> str:
    # Excel sheet titles: max 31 chars, no []:*?/\
    cleaned = "".join(ch for ch in name if ch not in "[]:*?/\\")
    return cleaned[:31] or "Plan"


class ExcelReportRenderer:
    def render(self, ctx: QuoteReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        off_day_fill = PatternFill("solid", fgColor="EEEEEE")
        work_fill = PatternFill("solid", fgColor="C6E0B4")

        def header_row(ws, headers, row=1):
            for col_index, h in enumerate(headers, start=1):
                cell = ws.cell(row=row, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"
        ws["A1"] = f"Training schedule - {ctx.quote.name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Quote ID", ctx.quote.id)
        kv("Client", ctx.quote.client_name or "-")
        kv("Work on Saturday", "Yes" if ctx.schedule.work_on_saturday else "No")
        kv("Work on Sunday", "Yes" if ctx.schedule.work_on_sunday else "No")
        kv("Generated on", ctx.generated_on.isoformat())

        row += 1
        header_row(ws, ["Plan", "Total hours", "Total days", "Total cost"], row=row)
        row += 1
        for plan_id, plan in ctx.schedule.gantt_by_plan.items():
            summary = ctx.cost_for_plan(plan_id)
            values = [
                plan.plan_name,
                ctx.schedule.hours_by_plan.get(plan_id, 0.0),
                plan.total_days if plan.resources else 0,
                summary.total_cost if summary else 0.0,
            ]
            for c, v in enumerate(values, start=1):
                ws.cell(row, c, v).border = thin_border
            row += 1

        ws.column_dimensions["A"].width = 24
        ws.column_dimensions["B"].width = 38
        ws.column_dimensions["C"].width = 14
        ws.column_dimensions["D"].width = 14

        # ---------------- One sheet per plan ----------------
        fixed = ["Resource", "Item", "Kind", "Hours", "Start day", "Days"]
        for plan in ctx.schedule.gantt_by_plan.values():
            ws_plan = wb.create_sheet(_sheet_title(plan.plan_name))
            day_count = plan.total_days if plan.resources else 0
            header_row(ws_plan, fixed + [str(day) for day in range(1, day_count + 1)])

            # shade non-working days in the header so the timeline reads like the on-screen one
            for day in range(1, day_count + 1):
                if not is_working_day(day, ctx.schedule.work_on_saturday, ctx.schedule.work_on_sunday):
                    ws_plan.cell(row=1, column=len(fixed) + day).fill = off_day_fill

            r = 2
            for resource in plan.resources:
                for task in resource.tasks:
                    values = [
                        resource.resource_name,
                        task.item_name or task.task_key,
                        task.item_kind.value,
                        task.hours_required,
                        task.start_day,
                        task.duration_days,
                    ]
                    for c, v in enumerate(values, start=1):
                        ws_plan.cell(r, c, v).border = thin_border
                    for offset, hours in enumerate(task.hours_per_day):
                        cell = ws_plan.cell(r, len(fixed) + task.start_day + offset, hours)
                        cell.border = thin_border
                        if hours:
                            cell.fill = work_fill
                    r += 1

            ws_plan.column_dimensions["A"].width = 24
            ws_plan.column_dimensions["B"].width = 28
            for col in range(len(fixed) + 1, len(fixed) + day_count + 1):
                ws_plan.column_dimensions[get_column_letter(col)].width = 4

        # ---------------- Topics ----------------
        if ctx.has_topics:
            ws_t = wb.create_sheet("Topics")
            header_row(ws_t, ["Plan", "Item", "Kind", "#", "Topic"])
            r = 2
            for plan_id, plan in ctx.schedule.gantt_by_plan.items():
                number = 0
                previous_item = None
                for topic in ctx.topics_for_plan(plan_id):
                    item = (topic.item_kind, topic.item_id)
                    number = number + 1 if item == previous_item else 1
                    previous_item = item
                    values = [plan.plan_name, topic.item_name, topic.item_kind.value, number, topic.topic_text]
                    for c, v in enumerate(values, start=1):
                        ws_t.cell(r, c, v).border = thin_border
                    r += 1

            ws_t.column_dimensions["A"].width = 18
            ws_t.column_dimensions["B"].width = 28
            ws_t.column_dimensions["C"].width = 10
            ws_t.column_dimensions["D"].width = 5
            ws_t.column_dimensions["E"].width = 60

        # ---------------- Costs ----------------
        if ctx.costs:
            ws_c = wb.create_sheet("Costs")
            header_row(
                ws_c,
                [
                    "Plan",
                    "Resource",
                    "Hours",
                    "Hourly rate",
                    "Training days",
                    "Trip days",
                    "Training cost",
                    "Trip cost",
                    "Total",
                ],
            )
            r = 2
            for summary in ctx.costs:
                for line in summary.lines:
                    values = [
                        summary.plan_name,
                        line.resource_name,
                        line.total_hours,
                        line.hourly_rate,
                        line.training_days,
                        line.business_trip_days,
                        line.training_cost,
                        line.trip_costs.total,
                        line.total_cost,
                    ]
                    for c, v in enumerate(values, start=1):
                        ws_c.cell(r, c, v).border = thin_border
                    r += 1

            ws_c.column_dimensions["A"].width = 18
            ws_c.column_dimensions["B"].width = 24
            for col in ("C", "D", "E", "F", "G", "H", "I"):
                ws_c.column_dimensions[col].width = 14

        wb.save(output_path)
        return output_path
