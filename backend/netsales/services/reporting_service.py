# Overview: Daily sales report: filter, order and total card-network entries; CSV export.

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .totals import coerce_amount


# Column headers of the exported report, in column order
CSV_HEADERS = (
    "اسم الموظف",
    "رقم الشبكة",
    "مستر كارد",
    "مدى",
    "فيزا",
    "الشبكة الخليجية",
    "الإجمالي",
)
CSV_TOTALS_LABEL = "إجمالي كل شبكة"
UNKNOWN_EMPLOYEE = "غير معروف"

# Forces spreadsheet apps to read the file as UTF-8
UTF8_BOM = "\ufeff"


@dataclass(frozen=True)
class ReportTotals:
    mastercard: float = 0.0
    mada: float = 0.0
    visa: float = 0.0
    gcc: float = 0.0

    @property
    def grand_total(self) -> float:
        return round(self.mastercard + self.mada + self.visa + self.gcc, 2)

    def to_dict(self) -> dict:
        return {
            "mastercard": self.mastercard,
            "mada": self.mada,
            "visa": self.visa,
            "gcc": self.gcc,
            "grandTotal": self.grand_total,
        }


@dataclass(frozen=True)
class DailyReport:
    date: str
    entries: tuple = field(default_factory=tuple)
    totals: ReportTotals = field(default_factory=ReportTotals)
    employee_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "employeeId": self.employee_id,
            "entries": [dict(entry) for entry in self.entries],
            "totals": self.totals.to_dict(),
        }


def sum_totals(entries: Iterable[Mapping]) -> ReportTotals:
    mastercard = mada = visa = gcc = 0.0
    for entry in entries:
        mastercard += coerce_amount(entry.get("mastercardAmount"))
        mada += coerce_amount(entry.get("madaAmount"))
        visa += coerce_amount(entry.get("visaAmount"))
        gcc += coerce_amount(entry.get("gccAmount"))
    return ReportTotals(
        mastercard=round(mastercard, 2),
        mada=round(mada, 2),
        visa=round(visa, 2),
        gcc=round(gcc, 2),
    )


def daily_report(sales: Iterable[Mapping], date: str, employee_id: str | None = None) -> DailyReport:
    """
    Build the report for one business day.

    Entries with date == `date` (and, when given, employeeId == `employee_id`)
    ordered by networkNumber ascending. The sort is stable, so equal network
    numbers keep their collection order.
    """
    selected = [
        sale for sale in sales
        if sale.get("date") == date
        and (employee_id is None or str(sale.get("employeeId")) == str(employee_id))
    ]
    selected.sort(key=lambda sale: sale.get("networkNumber") or 0)
    return DailyReport(
        date=date,
        entries=tuple(selected),
        totals=sum_totals(selected),
        employee_id=str(employee_id) if employee_id is not None else None,
    )


def employee_names(employees: Iterable[Mapping]) -> dict[str, str]:
    return {str(emp.get("id")): emp.get("name") or "" for emp in employees}


def csv_filename(date: str) -> str:
    return f"sales-report-{date}.csv"


def _fmt(value) -> str:
    amount = coerce_amount(value)
    if amount.is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def report_to_csv(report: DailyReport, names: Mapping[str, str]) -> str:
    """
    Render the report as CSV text (BOM, header, rows, blank line, totals row).

    Owners missing from `names` (deleted employees) are shown as unknown.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for entry in report.entries:
        writer.writerow([
            names.get(str(entry.get("employeeId"))) or UNKNOWN_EMPLOYEE,
            entry.get("networkNumber"),
            _fmt(entry.get("mastercardAmount")),
            _fmt(entry.get("madaAmount")),
            _fmt(entry.get("visaAmount")),
            _fmt(entry.get("gccAmount")),
            _fmt(entry.get("total")),
        ])
    writer.writerow([])
    totals = report.totals
    writer.writerow([
        CSV_TOTALS_LABEL,
        "",
        _fmt(totals.mastercard),
        _fmt(totals.mada),
        _fmt(totals.visa),
        _fmt(totals.gcc),
        _fmt(totals.grand_total),
    ])
    return UTF8_BOM + buffer.getvalue()
