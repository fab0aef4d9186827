"""
Sales repository - daily card-network entries.

Wire records use string ids and camelCase keys; store rows use integer ids.
The total is always recomputed here from the four amounts; any total sent
by the caller is discarded.
"""

from __future__ import annotations

from ..extensions import db
from ..errors import NotFound
from ..models import SaleEntry
from ..validation import (
    parse_date_field,
    parse_employee_ref,
    parse_network_number,
    parse_record_id,
    require_json_object,
)
from .totals import calculate_total, round_amount

# wire key -> column attribute
_AMOUNT_COLUMNS = {
    "mastercardAmount": "mastercard_amount",
    "madaAmount": "mada_amount",
    "visaAmount": "visa_amount",
    "gccAmount": "gcc_amount",
}


def _load(sale_id) -> SaleEntry:
    record_id = parse_record_id(sale_id)
    sale = db.session.query(SaleEntry).filter_by(id=record_id).first()
    if not sale:
        raise NotFound("Sale not found")
    return sale


def _refresh_total(sale: SaleEntry) -> None:
    sale.total = calculate_total(
        sale.mastercard_amount,
        sale.mada_amount,
        sale.visa_amount,
        sale.gcc_amount,
    )


def list_sales(*, date: str | None = None, employee_id: str | None = None) -> list[dict]:
    """All entries in insertion order, optionally narrowed by business day and owner."""
    query = db.session.query(SaleEntry)
    if date is not None:
        query = query.filter(SaleEntry.date == parse_date_field(date))
    if employee_id is not None:
        query = query.filter(SaleEntry.employee_id == parse_employee_ref(employee_id))
    return [sale.to_dict() for sale in query.order_by(SaleEntry.id.asc()).all()]


def get_sale(sale_id) -> dict:
    return _load(sale_id).to_dict()


def create_sale(data: dict) -> dict:
    """Insert a new entry for the given employee and return it with its id and total."""
    data = require_json_object(data)

    sale = SaleEntry(
        date=parse_date_field(data.get("date")),
        network_number=parse_network_number(data.get("networkNumber")),
        employee_id=parse_employee_ref(data.get("employeeId")),
    )
    for key, column in _AMOUNT_COLUMNS.items():
        setattr(sale, column, round_amount(data.get(key)))
    _refresh_total(sale)

    db.session.add(sale)
    db.session.commit()
    return sale.to_dict()


def update_sale(sale_id, data: dict) -> dict:
    """
    Write the supplied fields onto an existing entry.

    id, employeeId and total are not writable; the total is recomputed
    from the resulting amounts.
    """
    data = require_json_object(data)
    fields = {k: v for k, v in data.items() if k not in ("id", "employeeId", "total")}

    sale = _load(sale_id)

    changes: dict = {}
    if "date" in fields:
        changes["date"] = parse_date_field(fields["date"])
    if "networkNumber" in fields:
        changes["network_number"] = parse_network_number(fields["networkNumber"])
    for key, column in _AMOUNT_COLUMNS.items():
        if key in fields:
            changes[column] = round_amount(fields[key])

    for column, value in changes.items():
        setattr(sale, column, value)
    _refresh_total(sale)

    db.session.commit()
    return sale.to_dict()


def delete_sale(sale_id) -> None:
    sale = _load(sale_id)
    db.session.delete(sale)
    db.session.commit()
