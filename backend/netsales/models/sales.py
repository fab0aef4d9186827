from __future__ import annotations

from ..extensions import db


class SaleEntry(db.Model):
    """
    Daily card-network totals logged by one employee for one network number.

    total is derived from the four amounts and rewritten on every save.
    employee_id is a weak text reference: no foreign key, no cascade.
    """
    __tablename__ = "sales"
    __table_args__ = (
        # Daily report lookups
        db.Index("ix_sales_date_network", "date", "network_number"),
        db.Index("ix_sales_employee_date", "employee_id", "date"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)

    # Business day (YYYY-MM-DD), independent of created_at
    date = db.Column(db.String(10), nullable=False)
    network_number = db.Column(db.Integer, nullable=False)

    # Amounts in SAR
    mastercard_amount = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    mada_amount = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    visa_amount = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    gcc_amount = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    total = db.Column(db.Numeric(14, 2, asdecimal=False), nullable=False, default=0)

    employee_id = db.Column(db.String(64), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "date": self.date,
            "networkNumber": self.network_number,
            "mastercardAmount": float(self.mastercard_amount or 0),
            "madaAmount": float(self.mada_amount or 0),
            "visaAmount": float(self.visa_amount or 0),
            "gccAmount": float(self.gcc_amount or 0),
            "total": float(self.total or 0),
            "employeeId": str(self.employee_id),
        }
