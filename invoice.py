"""
Receipt/invoice for the rows on the record page, and the printable records list
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from calculations import is_blank_line, line_result
from models import Language, LineItem
from reports import Report
from translations import TRANSLATIONS
from utils import format_number, safe_float

WIDTH = 40


@dataclass(frozen=True)
class InvoiceLine:
    material: str
    weight: float
    deduction: float
    price: float
    subtotal: int


@dataclass(frozen=True)
class Invoice:
    company_name: str
    number: str
    date: str
    time: str
    lines: List[InvoiceLine]
    total: int


def invoice_number(rng: Optional[random.Random] = None) -> str:
    """'SI No. ' plus six random digits"""
    return f"SI No. {(rng or random).randrange(1000000):06d}"


def build_invoice(
    items: Sequence[LineItem],
    day: str,
    total: int,
    company_name: str,
    number: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Invoice:
    """
    Receipt for the rows as entered. Each line is priced again with the
    record calculator; total is the grand total shown on the record page.
    """
    lines = [
        InvoiceLine(
            material=item.material or "Item",
            weight=safe_float(item.weight),
            deduction=safe_float(item.deduction),
            price=safe_float(item.price),
            subtotal=line_result(item),
        )
        for item in items
        if not is_blank_line(item)
    ]
    return Invoice(
        company_name=company_name,
        number=number or invoice_number(),
        date=day,
        time=(now or datetime.now()).strftime("%H:%M"),
        lines=lines,
        total=total,
    )


def _columns(left: str, mid1: str, mid2: str, right: str) -> str:
    return f"{left:<14}{mid1:^8}{mid2:^8}{right:>10}"


def render_invoice_text(invoice: Invoice, labels: Optional[dict] = None) -> str:
    """Fixed-width receipt text for printing or saving"""
    t = labels or TRANSLATIONS[Language.EN]["invoice"]
    dashes = "-" * WIDTH
    out = [
        invoice.company_name.center(WIDTH),
        t["proofCopy"].center(WIDTH),
        dashes,
        invoice.number.center(WIDTH),
        f"{invoice.date} {invoice.time}",
        "=" * WIDTH,
        _columns(t["item"], t["qty"], t["price"], t["amt"]),
        dashes,
    ]
    for line in invoice.lines:
        out.append(line.material)
        out.append(_columns(
            f"  ({format_number(line.deduction)}%)",
            format_number(line.weight),
            format_number(line.price),
            f"{line.subtotal:,}",
        ))
    out.append("=" * WIDTH)
    out.append(f"{t['totalAmount']:<20}{invoice.total:>20,}")
    out.append(f"{t['cash']:<20}{invoice.total:>20,}")
    out.append("")
    out.append(f"{t['signature']}: ____________________")
    out.append("")
    out.append(t["footerNote"].center(WIDTH))
    return "\n".join(out)


def render_report_text(
    report: Report,
    headers: Sequence[str],
    labels: Optional[dict] = None,
    company_name: str = "",
) -> str:
    """
    Fixed-width text of the whole filtered list, in report order.

    Every row of the report is printed, not only the page on screen.
    headers are the six report column titles (see translations.report_headers);
    labels is the "view" section of a translation table.
    """
    t = labels or TRANSLATIONS[Language.EN]["view"]
    date_h, material_h, weight_h, deduction_h, price_h, result_h = headers
    dashes = "-" * WIDTH
    out = []
    if company_name:
        out.append(company_name.center(WIDTH))
    out.append(t["title"].center(WIDTH))
    out.append("=" * WIDTH)
    out.append(f"{material_h} ({deduction_h} %)")
    out.append(_columns(date_h, weight_h, price_h, result_h))
    out.append(dashes)
    if not report.rows:
        out.append(t["noRecords"].center(WIDTH))
    for row in report.rows:
        out.append(f"{row.material} ({format_number(row.deduction)}%)")
        out.append(_columns(
            row.date,
            format_number(row.weight),
            format_number(row.price),
            f"{row.result:,}",
        ))
    out.append("=" * WIDTH)
    out.append(f"{t['totalSummary']:<20}{report.total:>20,}")
    return "\n".join(out)
