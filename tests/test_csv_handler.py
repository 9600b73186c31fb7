"""Tests for CSV export of report rows."""

import csv
import io

from helpers import make_record

from csv_handler import BOM, export_rows_to_csv, render_csv, report_filename
from reports import flatten_records


def sample_rows():
    return flatten_records([
        make_record("r1", "2024-01-10", 100, [
            ("Copper", 10.0, 0.0, 250.0, 2500),
            ('Wire, "thin"', 2.5, 5.0, 12.75, 30),
        ]),
    ])


def test_render_csv_layout() -> None:
    text = render_csv(sample_rows())

    assert text.startswith(BOM)
    assert text[len(BOM):].split("\n") == [
        "Date,Material,Weight,Deduction,Price,Result",
        '2024-01-10,"Copper",10,0,250,2500',
        '2024-01-10,"Wire, ""thin""",2.5,5,12.75,30',
    ]


def test_render_csv_uses_given_headers() -> None:
    text = render_csv([], ["日期", "材料", "重量", "扣重", "單價", "金額"])
    assert text == BOM + "日期,材料,重量,扣重,單價,金額"


def test_export_writes_utf8_with_bom(tmp_path) -> None:
    path = tmp_path / "report.csv"
    export_rows_to_csv(sample_rows(), str(path))

    data = path.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    assert data.decode("utf-8-sig").count("\n") == 2


def test_report_filename() -> None:
    assert report_filename("2024-03-05") == "amc_report_2024-03-05.csv"


def test_header_cells_with_commas_or_quotes_are_quoted() -> None:
    headers = ["Date", "Weight, kg", 'Price "PHP"', "Material", "Deduction", "Result"]
    header_line = render_csv([], headers)[len(BOM):]
    assert header_line == 'Date,"Weight, kg","Price ""PHP""",Material,Deduction,Result'

    parsed = next(csv.reader(io.StringIO(header_line)))
    assert parsed == headers
