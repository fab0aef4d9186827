# Overview: Write-through client sessions (roster, sales ledger, admin gate) over ApiClient.

from __future__ import annotations

import hmac
import logging
from typing import Optional

from ..errors import RecordError
from ..services.reporting_service import DailyReport, daily_report
from .api import ApiClient
from .state import (
    ADD,
    DELETE,
    LOGIN,
    LOGOUT,
    SET_ALL,
    UPDATE,
    Action,
    EmployeesState,
    SalesState,
    employees_reducer,
    sales_reducer,
)

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    """
    Roster cache plus the logged-in employee.

    Mutations call the API first and dispatch only on success; failures are
    logged and re-raised with the state untouched.
    """

    def __init__(self, api: ApiClient):
        self.api = api
        self.state = EmployeesState()

    def dispatch(self, action: Action) -> EmployeesState:
        self.state = employees_reducer(self.state, action)
        return self.state

    @property
    def employees(self) -> tuple:
        return self.state.employees

    @property
    def current_user(self) -> Optional[dict]:
        return self.state.current_user

    def load(self) -> None:
        try:
            employees = self.api.get_employees()
        except RecordError as exc:
            logger.error("Failed to fetch employees: %s", exc)
            raise
        self.dispatch(Action(SET_ALL, employees))

    def login(self, username: str, password: str) -> bool:
        """Match (username, password) against the loaded roster."""
        for employee in self.state.employees:
            if employee.get("username") == username and employee.get("password_hash") == password:
                self.dispatch(Action(LOGIN, employee))
                logger.info("Employee %s logged in", employee.get("id"))
                return True
        return False

    def logout(self) -> None:
        self.dispatch(Action(LOGOUT))

    def add_employee(self, employee: dict) -> dict:
        try:
            created = self.api.add_employee(employee)
        except RecordError as exc:
            logger.error("Failed to add employee: %s", exc)
            raise
        self.dispatch(Action(ADD, created))
        return created

    def update_employee(self, employee: dict) -> dict:
        try:
            updated = self.api.update_employee(employee)
        except RecordError as exc:
            logger.error("Failed to update employee: %s", exc)
            raise
        self.dispatch(Action(UPDATE, updated))
        return updated

    def delete_employee(self, employee_id: str) -> None:
        try:
            self.api.delete_employee(employee_id)
        except RecordError as exc:
            logger.error("Failed to delete employee: %s", exc)
            raise
        self.dispatch(Action(DELETE, employee_id))

    def names(self) -> dict[str, str]:
        return {emp["id"]: emp.get("name") or "" for emp in self.state.employees}


class SalesLedger:
    """Sales cache kept in step with the store (write-through)."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.state = SalesState()

    def dispatch(self, action: Action) -> SalesState:
        self.state = sales_reducer(self.state, action)
        return self.state

    @property
    def sales(self) -> tuple:
        return self.state.sales

    def load(self) -> None:
        try:
            sales = self.api.get_sales()
        except RecordError as exc:
            logger.error("Failed to fetch sales: %s", exc)
            raise
        self.dispatch(Action(SET_ALL, sales))

    def add_sale(self, sale: dict) -> dict:
        try:
            created = self.api.add_sale(sale)
        except RecordError as exc:
            logger.error("Failed to add sale: %s", exc)
            raise
        self.dispatch(Action(ADD, created))
        return created

    def update_sale(self, sale: dict) -> dict:
        try:
            updated = self.api.update_sale(sale)
        except RecordError as exc:
            logger.error("Failed to update sale: %s", exc)
            raise
        self.dispatch(Action(UPDATE, updated))
        return updated

    def delete_sale(self, sale_id: str) -> None:
        try:
            self.api.delete_sale(sale_id)
        except RecordError as exc:
            logger.error("Failed to delete sale: %s", exc)
            raise
        self.dispatch(Action(DELETE, sale_id))

    def report(self, date: str, employee_id: Optional[str] = None) -> DailyReport:
        return daily_report(self.state.sales, date, employee_id=employee_id)


class AdminGate:
    """Static-secret admin login; the flag lives only as long as this object."""

    def __init__(self, secret: str):
        self._secret = secret
        self.is_authenticated = False

    def login(self, password: str) -> bool:
        if hmac.compare_digest(str(password).encode("utf-8"), str(self._secret).encode("utf-8")):
            self.is_authenticated = True
            return True
        return False

    def logout(self) -> None:
        self.is_authenticated = False


class PosSession:
    """
    One client session: roster, sales ledger and admin gate.

    Call `load()` before employee login; the roster is matched locally.
    """

    def __init__(self, api: ApiClient, admin_secret: str):
        self.api = api
        self.employees = EmployeeDirectory(api)
        self.sales = SalesLedger(api)
        self.admin = AdminGate(admin_secret)

    def load(self) -> None:
        self.sales.load()
        self.employees.load()

    @property
    def role(self) -> Optional[str]:
        if self.employees.current_user is not None:
            return "employee"
        if self.admin.is_authenticated:
            return "admin"
        return None

    def my_report(self, date: str) -> DailyReport:
        """Current employee's entries for one day."""
        user = self.employees.current_user
        if user is None:
            return DailyReport(date=date)
        return self.sales.report(date, employee_id=user["id"])

    def admin_report(self, date: str) -> DailyReport:
        return self.sales.report(date)

    def logout(self) -> None:
        if self.employees.current_user is not None:
            self.employees.logout()
        if self.admin.is_authenticated:
            self.admin.logout()
