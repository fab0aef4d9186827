# Overview: Payload builders for the sale entry form and the employee form.

from __future__ import annotations

from typing import Mapping, Optional

from ..errors import InvalidArgument
from ..services.totals import AMOUNT_FIELDS, coerce_amount, total_for
from ..time_utils import today_iso
from ..validation import BRANCHES, parse_network_number


def build_sale_payload(
    form: Mapping,
    current_user: Optional[Mapping],
    editing: Optional[Mapping] = None,
) -> dict:
    """
    Turn raw sale-form input into an API payload.

    New entries belong to the current user; edits keep the edited entry's
    id and employeeId. Blank amounts count as 0.
    """
    raw_network = form.get("networkNumber")
    if raw_network is None or str(raw_network).strip() == "":
        raise InvalidArgument("Network number is required")
    if current_user is None:
        raise InvalidArgument("No employee is logged in")

    payload = {
        "date": (form.get("date") or "").strip() or today_iso(),
        "networkNumber": parse_network_number(raw_network),
    }
    for key in AMOUNT_FIELDS:
        payload[key] = coerce_amount(form.get(key))

    if editing is not None:
        payload["id"] = editing["id"]
        payload["employeeId"] = editing["employeeId"]
    else:
        payload["employeeId"] = current_user["id"]
    return payload


def preview_total(form: Mapping) -> float:
    """Running total shown while the form is being filled."""
    return total_for(form)


def build_employee_payload(form: Mapping, existing: Optional[Mapping] = None) -> dict:
    """
    Turn employee-form input into an API payload.

    A password is required when adding; when editing a blank password keeps
    the current one.
    """
    password = form.get("password") or ""
    payload = {
        "name": (form.get("name") or "").strip(),
        "username": (form.get("username") or "").strip(),
        "branch": form.get("branch") or (existing or {}).get("branch") or BRANCHES[0],
    }
    if existing is None:
        if not password.strip():
            raise InvalidArgument("Password is required")
        payload["password_hash"] = password
        return payload

    payload["id"] = existing["id"]
    payload["password_hash"] = password if password.strip() else existing.get("password_hash")
    return payload
