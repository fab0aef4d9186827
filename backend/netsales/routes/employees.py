# Overview: Flask API routes for the employee roster; parses input and returns JSON responses.

from flask import Blueprint, current_app, jsonify, request

from ..errors import InvalidArgument, RecordError
from ..extensions import db
from ..services import employee_service


employees_bp = Blueprint("employees", __name__, url_prefix="/employees-api")


def _error_response(exc: RecordError):
    return jsonify(exc.to_dict()), exc.status_code


def _internal_error(exc: Exception, what: str):
    current_app.logger.exception("Failed to %s", what)
    db.session.rollback()
    return jsonify({"message": "Internal Server Error", "error": str(exc)}), 500


@employees_bp.get("")
def list_employees_route():
    try:
        return jsonify(employee_service.list_employees()), 200
    except Exception as exc:
        return _internal_error(exc, "list employees")


@employees_bp.get("/<employee_id>")
def get_employee_route(employee_id: str):
    try:
        return jsonify(employee_service.get_employee(employee_id)), 200
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "load employee")


@employees_bp.post("")
def create_employee_route():
    """Create an employee. Body: name, username, password_hash, branch."""
    try:
        employee = employee_service.create_employee(request.get_json(silent=True))
        current_app.logger.info("Created employee %s", employee["id"])
        return jsonify(employee), 201
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "create employee")


@employees_bp.put("/<employee_id>")
def update_employee_route(employee_id: str):
    """Update an employee; the id in the body is ignored."""
    try:
        employee = employee_service.update_employee(employee_id, request.get_json(silent=True))
        current_app.logger.info("Updated employee %s", employee_id)
        return jsonify(employee), 200
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "update employee")


@employees_bp.delete("/<employee_id>")
def delete_employee_route(employee_id: str):
    try:
        employee_service.delete_employee(employee_id)
        current_app.logger.info("Deleted employee %s", employee_id)
        return "", 204
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "delete employee")


@employees_bp.route("", methods=["PUT", "DELETE"])
def missing_employee_id_route():
    return _error_response(InvalidArgument("Missing employee ID"))
