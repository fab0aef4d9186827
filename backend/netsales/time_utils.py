from __future__ import annotations

from datetime import date
from typing import Optional


def today_iso() -> str:
    """Local calendar day as YYYY-MM-DD (the default business day for new entries)."""
    return date.today().isoformat()


def parse_business_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a business day in strict ISO form.

    - None / "" -> None
    - "YYYY-MM-DD" -> date
    - anything else raises ValueError
    """
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    if len(s) != 10:
        raise ValueError(f"not an ISO date: {value!r}")
    return date.fromisoformat(s)
