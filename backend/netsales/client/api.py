# Overview: HTTP client for the employees/sales API; maps failures onto the error taxonomy.

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import Config
from ..errors import InternalError, InvalidArgument, error_for_status

logger = logging.getLogger(__name__)

EMPLOYEES_ENDPOINT = "employees-api"
SALES_ENDPOINT = "sales-api"


class ApiClient:
    """
    Thin JSON client over httpx.

    base_url defaults to the configured API_BASE_URL (NETSALES_API_URL).
    Pass `transport` to run against an in-process app (httpx.WSGITransport).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, endpoint: str, method: str = "GET", data: Any = None) -> Any:
        """
        Send one request and decode the JSON reply.

        204 -> None. Non-2xx raises the matching RecordError subclass with the
        server's message.
        """
        try:
            response = self.client.request(method, f"/{endpoint}", json=data)
        except httpx.HTTPError as exc:
            raise InternalError(f"Request to {endpoint} failed: {exc}") from exc

        if response.status_code == 204:
            return None

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"message": "Unknown error"}
            message = body.get("message") or f"HTTP error! status: {response.status_code}"
            logger.debug("%s /%s -> %s: %s", method, endpoint, response.status_code, message)
            raise error_for_status(response.status_code, message, details=body.get("details"))

        return response.json()

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    def get_employees(self) -> list[dict]:
        return self.request(EMPLOYEES_ENDPOINT)

    def add_employee(self, employee: dict) -> dict:
        return self.request(EMPLOYEES_ENDPOINT, "POST", employee)

    def update_employee(self, employee: dict) -> dict:
        if not employee.get("id"):
            raise InvalidArgument("Missing employee ID")
        return self.request(f"{EMPLOYEES_ENDPOINT}/{employee['id']}", "PUT", employee)

    def delete_employee(self, employee_id: str) -> None:
        self.request(f"{EMPLOYEES_ENDPOINT}/{employee_id}", "DELETE")

    # ------------------------------------------------------------------
    # Sales
    # ------------------------------------------------------------------

    def get_sales(self) -> list[dict]:
        return self.request(SALES_ENDPOINT)

    def add_sale(self, sale: dict) -> dict:
        return self.request(SALES_ENDPOINT, "POST", sale)

    def update_sale(self, sale: dict) -> dict:
        if not sale.get("id"):
            raise InvalidArgument("Missing sale ID")
        return self.request(f"{SALES_ENDPOINT}/{sale['id']}", "PUT", sale)

    def delete_sale(self, sale_id: str) -> None:
        self.request(f"{SALES_ENDPOINT}/{sale_id}", "DELETE")
