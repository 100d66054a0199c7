from openpyxl import load_workbook

from labor_tracker.reports.excel_exporter import COLUMNS, build_excel_report


def test_single_report_sheet_with_columns():
    rows = [{"Date": "2025-06-01", "Site": "site1", "Category": "Mason (M)", "Workers": 3, "Cost": 3300, "Supervisor": "a@b.c"}]

    wb = load_workbook(build_excel_report(rows))

    assert wb.sheetnames == ["Report"]
    ws = wb["Report"]
    assert [c.value for c in ws[1]] == COLUMNS
    assert [c.value for c in ws[2]] == ["2025-06-01", "site1", "Mason (M)", 3, 3300, "a@b.c"]


def test_empty_report_still_has_headers():
    ws = load_workbook(build_excel_report([]))["Report"]
    assert [c.value for c in ws[1]] == COLUMNS
    assert ws.max_row == 1
