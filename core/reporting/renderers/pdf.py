from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.reporting.contexts import QuoteReportContext

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
])


class PdfReportRenderer:
    def render(self, ctx: QuoteReportContext, output_path: Path) -> Path:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=landscape(A4),
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        story.append(Paragraph(f"Training Schedule - {ctx.quote.name}", styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Summary ----------------
        info = [
            f"Quote ID: {ctx.quote.id}",
            f"Client: {ctx.quote.client_name or '-'}",
            f"Work on Saturday: {'yes' if ctx.schedule.work_on_saturday else 'no'}",
            f"Work on Sunday: {'yes' if ctx.schedule.work_on_sunday else 'no'}",
            f"Total training hours: {ctx.total_hours:.1f}",
            f"Generated on: {ctx.generated_on.isoformat()}",
        ]
        for line in info:
            story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 16))

        # ---------------- Plans ----------------
        for plan_id, plan in ctx.schedule.gantt_by_plan.items():
            hours = ctx.schedule.hours_by_plan.get(plan_id, 0.0)
            story.append(Paragraph(f"{plan.plan_name} ({hours:.1f} h)", styles["Heading2"]))
            story.append(Spacer(1, 8))

            if not plan.resources:
                story.append(Paragraph("No training scheduled.", styles["Normal"]))
                story.append(Spacer(1, 12))
                continue

            data = [["Resource", "Item", "Hours", "Start day", "End day", "Days"]]
            for resource in plan.resources:
                for task in resource.tasks:
                    data.append([
                        resource.resource_name,
                        task.item_name or task.task_key,
                        f"{task.hours_required:.1f}",
                        task.start_day,
                        task.end_day,
                        task.duration_days,
                    ])
            table = Table(data, colWidths=[170, 220, 70, 70, 70, 60])
            table.setStyle(_TABLE_STYLE)
            story.append(table)
            story.append(Spacer(1, 12))

            topics = ctx.topics_for_plan(plan_id)
            if topics:
                story.append(Paragraph("Training topics", styles["Heading3"]))
                topic_data = [["Item", "Topic"]]
                for topic in topics:
                    topic_data.append([topic.item_name, Paragraph(topic.topic_text, styles["Normal"])])
                topic_table = Table(topic_data, colWidths=[170, 440])
                topic_table.setStyle(_TABLE_STYLE)
                story.append(topic_table)
                story.append(Spacer(1, 12))

            summary = ctx.cost_for_plan(plan_id)
            if summary and summary.lines:
                cost_data = [["Resource", "Trip days", "Training cost", "Trip cost", "Total"]]
                for line in summary.lines:
                    cost_data.append([
                        line.resource_name,
                        line.business_trip_days,
                        f"{line.training_cost:.2f}",
                        f"{line.trip_costs.total:.2f}",
                        f"{line.total_cost:.2f}",
                    ])
                cost_data.append(["Total", "", "", "", f"{summary.total_cost:.2f}"])
                cost_table = Table(cost_data, colWidths=[170, 80, 110, 110, 110])
                cost_table.setStyle(_TABLE_STYLE)
                story.append(cost_table)
                story.append(Spacer(1, 16))

        doc.build(story)
        return output_path
