from __future__ import annotations

from ..extensions import db


class Employee(db.Model):
    """
    Roster entry for a sales employee.

    password_hash holds the credential exactly as entered; it is compared
    by plain equality at login. username is not unique.
    """
    __tablename__ = "employees"
    __table_args__ = (
        db.Index("ix_employees_username", "username"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    username = db.Column(db.String(64), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    branch = db.Column(db.String(64), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "username": self.username,
            "password_hash": self.password_hash,
            "branch": self.branch,
        }
