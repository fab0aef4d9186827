# Overview: Pytest coverage for the daily report and its CSV export.

from netsales.services.reporting_service import (
    CSV_HEADERS,
    UNKNOWN_EMPLOYEE,
    csv_filename,
    daily_report,
    employee_names,
    report_to_csv,
)


def _sale(sale_id, network, *, date="2024-01-01", employee="1", mc=0, mada=0, visa=0, gcc=0):
    return {
        "id": sale_id,
        "date": date,
        "networkNumber": network,
        "mastercardAmount": mc,
        "madaAmount": mada,
        "visaAmount": visa,
        "gccAmount": gcc,
        "total": mc + mada + visa + gcc,
        "employeeId": employee,
    }


SALES = [
    _sale("1", 102, mc=200, mada=1500, visa=300, employee="1"),
    _sale("2", 101, mc=150.5, mada=2000, visa=500, gcc=120, employee="3"),
    _sale("3", 101, date="2023-10-25", mc=100, mada=1800, visa=450, gcc=50, employee="3"),
    _sale("4", 101, mada=10, employee="1"),
]


class TestDailyReport:

    def test_filters_by_date_and_sorts_by_network(self):
        report = daily_report(SALES, "2024-01-01")
        assert [e["id"] for e in report.entries] == ["2", "4", "1"]
        assert all(e["date"] == "2024-01-01" for e in report.entries)

    def test_ties_keep_collection_order(self):
        report = daily_report(list(reversed(SALES)), "2024-01-01")
        assert [e["id"] for e in report.entries] == ["4", "2", "1"]

    def test_per_method_sums_and_grand_total(self):
        totals = daily_report(SALES, "2024-01-01").totals
        assert totals.mastercard == 350.5
        assert totals.mada == 3510
        assert totals.visa == 800
        assert totals.gcc == 120
        assert totals.grand_total == totals.mastercard + totals.mada + totals.visa + totals.gcc
        assert totals.grand_total == 4780.5

    def test_employee_filter(self):
        report = daily_report(SALES, "2024-01-01", employee_id="1")
        assert [e["id"] for e in report.entries] == ["4", "1"]
        assert report.totals.grand_total == 2010

    def test_empty_day_is_zero_not_error(self):
        report = daily_report(SALES, "1999-01-01")
        assert report.entries == ()
        assert report.is_empty
        assert report.totals.to_dict() == {
            "mastercard": 0, "mada": 0, "visa": 0, "gcc": 0, "grandTotal": 0,
        }

    def test_to_dict(self):
        body = daily_report(SALES, "2023-10-25").to_dict()
        assert body["date"] == "2023-10-25"
        assert body["employeeId"] is None
        assert body["totals"]["grandTotal"] == 2400


class TestCsvExport:

    def test_layout(self):
        report = daily_report(SALES, "2024-01-01")
        names = employee_names([{"id": "1", "name": "أحمد محمود"}])
        text = report_to_csv(report, names)

        assert text.startswith("\ufeff")
        lines = text.lstrip("\ufeff").split("\n")
        assert lines[0] == ",".join(CSV_HEADERS)
        # owner "3" is not in the roster
        assert lines[1] == f"{UNKNOWN_EMPLOYEE},101,150.50,2000,500,120,2770.50"
        assert lines[2] == "أحمد محمود,101,0,10,0,0,10"
        assert lines[3] == "أحمد محمود,102,200,1500,300,0,2000"
        assert lines[4] == ""
        assert lines[5].endswith(",,350.50,3510,800,120,4780.50")

    def test_empty_report_still_has_totals_row(self):
        text = report_to_csv(daily_report([], "2024-01-01"), {})
        lines = text.lstrip("\ufeff").rstrip("\n").split("\n")
        assert len(lines) == 3
        assert lines[2].endswith(",,0,0,0,0,0")

    def test_filename(self):
        assert csv_filename("2024-01-01") == "sales-report-2024-01-01.csv"
