from openpyxl import load_workbook

from core.reporting.api import build_report_context, generate_excel_report, generate_pdf_report


def test_report_context_bundles_schedule_and_costs(services, quote_setup):
    ctx = build_report_context(services["schedule_service"], quote_setup["quote"].id)

    assert ctx.quote.name == "Plant retrofit"
    assert ctx.total_hours == 34
    assert ctx.cost_for_plan(1) is not None
    assert ctx.cost_for_plan(7) is None


def test_excel_report_has_overview_plan_and_cost_sheets(services, quote_setup, tmp_path):
    out = generate_excel_report(services["schedule_service"], quote_setup["quote"].id, tmp_path / "out" / "quote.xlsx")

    assert out.exists()
    wb = load_workbook(out)
    assert wb.sheetnames == ["Overview", "Standard", "Costs"]
    assert "Plant retrofit" in wb["Overview"]["A1"].value

    plan_ws = wb["Standard"]
    header = [c.value for c in plan_ws[1]]
    assert header[:6] == ["Resource", "Item", "Kind", "Hours", "Start day", "Days"]
    assert header[6:] == ["1", "2", "3"]
    assert [c.value for c in plan_ws[2]][:6] == ["Alice", "Lathe", "machine", 16, 1, 2]

    costs_ws = wb["Costs"]
    assert costs_ws.max_row == 3


def test_pdf_report_is_written(services, quote_setup, tmp_path):
    out = generate_pdf_report(services["schedule_service"], quote_setup["quote"].id, tmp_path / "quote.pdf")

    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")
