"""Tests for the Excel report."""

from helpers import make_record
from openpyxl import load_workbook

from excel_export import export_excel
from models import ReportFilters
from reports import flatten_records


def test_export_excel(tmp_path) -> None:
    rows = flatten_records([
        make_record("r1", "2024-01-10", 100, [
            ("Copper", 10.0, 0.0, 250.0, 2500),
            ("Iron", 50.0, 2.0, 12.0, 588),
        ]),
        make_record("r2", "2024-01-11", 200, [("copper", 2.0, 0.0, 250.0, 500)]),
    ])
    path = tmp_path / "report.xlsx"
    export_excel(rows, str(path), filters=ReportFilters(date_start="2024-01-01"))

    wb = load_workbook(path)
    assert wb.sheetnames == ["Report", "Materials"]

    ws = wb["Report"]
    values = [list(r) for r in ws.iter_rows(values_only=True)]
    assert values[0] == ["Date", "Material", "Weight", "Deduction", "Price", "Result"]
    assert values[1] == ["2024-01-10", "Copper", 10, 0, 250, 2500]
    assert values[4][0] == "TOTAL"
    assert values[4][5] == 3588
    assert values[-1][0] == "Dates: 2024-01-01 to ..."

    ms = wb["Materials"]
    summary = [list(r) for r in ms.iter_rows(min_row=2, values_only=True)]
    assert summary == [["Copper", 2, 12, 3000], ["Iron", 1, 49, 588]]
