# Overview: Flask CLI command groups for bootstrap, roster management and daily reports.

# backend/netsales/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Set DATABASE_URL (and optionally DB_NAME).
# - Set FLASK_APP to wsgi.py.
# - Use: python -m flask <group> <command> [options]
#
# System bootstrap:
# - python -m flask system init
#   Create the employees and sales tables (idempotent).
# - python -m flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - python -m flask system seed-demo
#   Insert the demo roster and a few demo sales.
#
# Roster:
# - python -m flask employees list
# - python -m flask employees create --name "..." --username ahmed --password 123 --branch "فرع طويق"
# - python -m flask employees delete 3
#
# Reports:
# - python -m flask reports daily --date 2024-01-01 [--employee-id 2] [--csv report.csv]

import click
from flask.cli import with_appcontext

from .errors import RecordError
from .extensions import db
from .services import employee_service, reporting_service, sales_service
from .time_utils import today_iso
from .validation import BRANCHES, parse_date_field


DEMO_EMPLOYEES = [
    {"name": "أحمد محمود", "username": "ahmed", "password_hash": "123", "branch": "فرع طويق"},
    {"name": "فاطمة علي", "username": "fatima", "password_hash": "456", "branch": "فرع الحزم"},
    {"name": "همدان", "username": "101", "password_hash": "123", "branch": "فرع عكاظ"},
]


@click.group('system')
def system_group():
    """System bootstrap commands."""


@system_group.command('init')
@with_appcontext
def init_system():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("PASS Tables ready: employees, sales")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete.")


@system_group.command('seed-demo')
@with_appcontext
def seed_demo():
    """Insert the demo roster (ahmed, fatima, 101) and three demo sales."""
    db.create_all()
    created = [employee_service.create_employee(data) for data in DEMO_EMPLOYEES]
    ahmed, _fatima, hamdan = created
    today = today_iso()

    demo_sales = [
        {"date": today, "networkNumber": 101, "mastercardAmount": 150.50, "madaAmount": 2000,
         "visaAmount": 500, "gccAmount": 120, "employeeId": hamdan["id"]},
        {"date": today, "networkNumber": 102, "mastercardAmount": 200.00, "madaAmount": 1500,
         "visaAmount": 300, "gccAmount": 0, "employeeId": ahmed["id"]},
        {"date": "2023-10-25", "networkNumber": 101, "mastercardAmount": 100.00, "madaAmount": 1800,
         "visaAmount": 450, "gccAmount": 50, "employeeId": hamdan["id"]},
    ]
    for data in demo_sales:
        sales_service.create_sale(data)

    click.echo(f"PASS Seeded {len(created)} employees and {len(demo_sales)} sales")


@click.group('employees')
def employees_group():
    """Employee roster commands."""


@employees_group.command('list')
@with_appcontext
def list_employees():
    """List the roster."""
    employees = employee_service.list_employees()
    if not employees:
        click.echo("No employees found.")
        return

    click.echo("\n" + "=" * 70)
    click.echo(f"{'ID':<6} {'Username':<16} {'Name':<28} {'Branch'}")
    click.echo("=" * 70)
    for emp in employees:
        click.echo(f"{emp['id']:<6} {emp['username']:<16} {emp['name']:<28} {emp['branch']}")


@employees_group.command('create')
@click.option('--name', prompt=True)
@click.option('--username', prompt=True)
@click.option('--password', prompt=True, hide_input=True)
@click.option('--branch', type=click.Choice(BRANCHES), default=BRANCHES[0], show_default=True)
@with_appcontext
def create_employee(name, username, password, branch):
    """Add an employee to the roster."""
    try:
        employee = employee_service.create_employee({
            "name": name,
            "username": username,
            "password_hash": password,
            "branch": branch,
        })
    except RecordError as exc:
        raise click.ClickException(exc.message)
    click.echo(f"PASS Created employee {employee['username']} (ID: {employee['id']})")


@employees_group.command('delete')
@click.argument('employee_id')
@with_appcontext
def delete_employee(employee_id):
    """Remove an employee (their sales stay in place)."""
    try:
        employee_service.delete_employee(employee_id)
    except RecordError as exc:
        raise click.ClickException(exc.message)
    click.echo(f"PASS Deleted employee {employee_id}")


@click.group('reports')
def reports_group():
    """Daily sales reports."""


@reports_group.command('daily')
@click.option('--date', 'day', default=None, help='Business day (YYYY-MM-DD), default today')
@click.option('--employee-id', default=None, help='Only this employee\'s entries')
@click.option('--csv', 'csv_path', type=click.Path(dir_okay=False, writable=True), default=None,
              help='Write the report as CSV to this path')
@with_appcontext
def daily_report(day, employee_id, csv_path):
    """Show (or export) the report for one business day."""
    try:
        day = parse_date_field(day or today_iso())
        sales = sales_service.list_sales(date=day)
    except RecordError as exc:
        raise click.ClickException(exc.message)

    report = reporting_service.daily_report(sales, day, employee_id=employee_id)
    names = reporting_service.employee_names(employee_service.list_employees())

    if csv_path:
        if report.is_empty:
            click.echo(f"No entries for {day}; nothing exported.")
            return
        with open(csv_path, "w", encoding="utf-8", newline="") as fh:
            fh.write(reporting_service.report_to_csv(report, names))
        click.echo(f"PASS Wrote {len(report.entries)} entries to {csv_path}")
        return

    if report.is_empty:
        click.echo(f"No entries for {day}.")
    else:
        click.echo(f"{'Network':<9} {'Employee':<24} {'Mastercard':>11} {'Mada':>11} "
                   f"{'Visa':>11} {'GCC':>11} {'Total':>12}")
        for entry in report.entries:
            name = names.get(entry["employeeId"]) or reporting_service.UNKNOWN_EMPLOYEE
            click.echo(
                f"{entry['networkNumber']:<9} {name:<24} {entry['mastercardAmount']:>11.2f} "
                f"{entry['madaAmount']:>11.2f} {entry['visaAmount']:>11.2f} "
                f"{entry['gccAmount']:>11.2f} {entry['total']:>12.2f}"
            )

    totals = report.totals
    click.echo(
        f"TOTAL mastercard={totals.mastercard:.2f} mada={totals.mada:.2f} "
        f"visa={totals.visa:.2f} gcc={totals.gcc:.2f} grand_total={totals.grand_total:.2f}"
    )


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(employees_group)
    app.cli.add_command(reports_group)
