# Overview: Repository operations for the employee roster; translates wire records to store rows.

from __future__ import annotations

from ..extensions import db
from ..errors import NotFound
from ..models import Employee
from ..validation import (
    parse_branch,
    parse_record_id,
    require_json_object,
    require_secret,
    require_text,
)


def _load(employee_id) -> Employee:
    record_id = parse_record_id(employee_id)
    employee = db.session.query(Employee).filter_by(id=record_id).first()
    if not employee:
        raise NotFound("Employee not found")
    return employee


def list_employees() -> list[dict]:
    employees = db.session.query(Employee).order_by(Employee.id.asc()).all()
    return [employee.to_dict() for employee in employees]


def get_employee(employee_id) -> dict:
    return _load(employee_id).to_dict()


def create_employee(data: dict) -> dict:
    """Insert a new employee; the store assigns the id."""
    data = require_json_object(data)

    employee = Employee(
        name=require_text(data, "name"),
        username=require_text(data, "username"),
        password_hash=require_secret(data, "password_hash"),
        branch=parse_branch(data.get("branch")),
    )

    db.session.add(employee)
    db.session.commit()
    return employee.to_dict()


def update_employee(employee_id, data: dict) -> dict:
    """
    Write the supplied fields onto an existing employee.

    'id' in the body is ignored. An empty or absent password keeps the
    stored one.
    """
    data = require_json_object(data)
    fields = {k: v for k, v in data.items() if k != "id"}

    employee = _load(employee_id)

    changes: dict = {}
    if "name" in fields:
        changes["name"] = require_text(fields, "name")
    if "username" in fields:
        changes["username"] = require_text(fields, "username")
    if "branch" in fields:
        changes["branch"] = parse_branch(fields.get("branch"))
    password = fields.get("password_hash")
    if isinstance(password, str) and password.strip():
        changes["password_hash"] = password

    for key, value in changes.items():
        setattr(employee, key, value)

    db.session.commit()
    return employee.to_dict()


def delete_employee(employee_id) -> None:
    """
    Remove an employee.

    Sales referencing the employee are left in place.
    """
    employee = _load(employee_id)
    db.session.delete(employee)
    db.session.commit()
