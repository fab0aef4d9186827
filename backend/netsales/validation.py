from __future__ import annotations

import re
from typing import Any

from netsales.errors import InvalidArgument
from netsales.time_utils import parse_business_date

# Fixed branch enumeration (display names as entered by the admin)
BRANCHES = ("فرع طويق", "فرع الحزم", "فرع عكاظ")

_RECORD_ID_RE = re.compile(r"^[0-9]+$")

# Largest id a signed 64-bit store column can hold
MAX_RECORD_ID = 2**63 - 1


def parse_record_id(raw: Any) -> int:
    """Translate a wire id (decimal string) into the store's integer id."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and _RECORD_ID_RE.match(raw.strip()):
        value = int(raw.strip())
    else:
        raise InvalidArgument("Invalid ID format")
    if value <= 0 or value > MAX_RECORD_ID:
        raise InvalidArgument("Invalid ID format")
    return value


def require_json_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return payload


def parse_network_number(value: Any) -> int:
    # Integers - strict validation to reject floats and scientific notation
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped and re.fullmatch(r"-?[0-9]+", stripped):
            return int(stripped)
    raise InvalidArgument("networkNumber must be an integer")


def parse_date_field(value: Any) -> str:
    try:
        day = parse_business_date(value if isinstance(value, str) else None)
    except ValueError:
        day = None
    if day is None:
        raise InvalidArgument("date must be an ISO date (YYYY-MM-DD)")
    return day.isoformat()


def require_text(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{key} is required")
    return value.strip()


def require_secret(payload: dict, key: str) -> str:
    """Like require_text, but the value is kept exactly as entered."""
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{key} is required")
    return value


def parse_branch(value: Any) -> str:
    if not isinstance(value, str) or value.strip() not in BRANCHES:
        raise InvalidArgument("branch must be one of: " + ", ".join(BRANCHES))
    return value.strip()


def parse_employee_ref(value: Any) -> str:
    """
    Convert an incoming employeeId into the stored reference.

    The reference is weak: no lookup is made against the employees table.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise InvalidArgument("employeeId is required")
