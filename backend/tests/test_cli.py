# Overview: Pytest coverage for the flask CLI command groups.

from netsales.services import employee_service, sales_service


class TestSystemCommands:

    def test_seed_demo(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["system", "seed-demo"])
        assert result.exit_code == 0, result.output
        assert "Seeded 3 employees and 3 sales" in result.output

        usernames = [emp["username"] for emp in employee_service.list_employees()]
        assert usernames == ["ahmed", "fatima", "101"]
        assert len(sales_service.list_sales()) == 3


class TestEmployeeCommands:

    def test_create_and_list(self, app, db_session):
        runner = app.test_cli_runner()
        result = runner.invoke(args=[
            "employees", "create",
            "--name", "Hamdan", "--username", "hamdan", "--password", "123",
            "--branch", "فرع عكاظ",
        ])
        assert result.exit_code == 0, result.output

        result = runner.invoke(args=["employees", "list"])
        assert "hamdan" in result.output

    def test_delete_missing(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["employees", "delete", "4040"])
        assert result.exit_code != 0
        assert "Employee not found" in result.output


class TestReportCommands:

    def test_daily_report_table(self, app, ahmed, make_sale):
        make_sale(ahmed["id"], network=2, mastercard=10)
        make_sale(ahmed["id"], network=1, mada=5)

        result = app.test_cli_runner().invoke(args=["reports", "daily", "--date", "2024-01-01"])
        assert result.exit_code == 0, result.output
        assert "grand_total=15.00" in result.output

    def test_daily_report_empty(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["reports", "daily", "--date", "2030-01-01"])
        assert result.exit_code == 0
        assert "No entries for 2030-01-01." in result.output
        assert "grand_total=0.00" in result.output

    def test_daily_report_csv(self, app, ahmed, make_sale, tmp_path):
        make_sale(ahmed["id"], network=3, visa=7)
        target = tmp_path / "report.csv"

        result = app.test_cli_runner().invoke(
            args=["reports", "daily", "--date", "2024-01-01", "--csv", str(target)]
        )
        assert result.exit_code == 0, result.output
        text = target.read_text(encoding="utf-8")
        assert text.startswith("\ufeff")
        assert "أحمد محمود,3,0,0,7,0,7" in text

    def test_empty_day_csv_not_written(self, app, db_session, tmp_path):
        target = tmp_path / "report.csv"

        result = app.test_cli_runner().invoke(
            args=["reports", "daily", "--date", "2030-01-01", "--csv", str(target)]
        )
        assert result.exit_code == 0, result.output
        assert "nothing exported" in result.output
        assert not target.exists()

    def test_bad_date(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["reports", "daily", "--date", "yesterday"])
        assert result.exit_code != 0
