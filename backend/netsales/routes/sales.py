# Overview: Flask API routes for daily sale entries; parses input and returns JSON responses.

from flask import Blueprint, current_app, jsonify, request

from ..errors import InvalidArgument, RecordError
from ..extensions import db
from ..services import sales_service


sales_bp = Blueprint("sales", __name__, url_prefix="/sales-api")


def _error_response(exc: RecordError):
    return jsonify(exc.to_dict()), exc.status_code


def _internal_error(exc: Exception, what: str):
    current_app.logger.exception("Failed to %s", what)
    db.session.rollback()
    return jsonify({"message": "Internal Server Error", "error": str(exc)}), 500


@sales_bp.get("")
def list_sales_route():
    """
    List sale entries.

    Optional query filters: date (YYYY-MM-DD), employeeId.
    """
    try:
        sales = sales_service.list_sales(
            date=request.args.get("date"),
            employee_id=request.args.get("employeeId"),
        )
        return jsonify(sales), 200
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "list sales")


@sales_bp.get("/<sale_id>")
def get_sale_route(sale_id: str):
    try:
        return jsonify(sales_service.get_sale(sale_id)), 200
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "load sale")


@sales_bp.post("")
def create_sale_route():
    """
    Log a sale entry.

    Body: date, networkNumber, the four amounts and employeeId. Any total
    in the body is ignored and recomputed.
    """
    try:
        sale = sales_service.create_sale(request.get_json(silent=True))
        current_app.logger.info(
            "Created sale %s (employee %s, network %s)",
            sale["id"], sale["employeeId"], sale["networkNumber"],
        )
        return jsonify(sale), 201
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "create sale")


@sales_bp.put("/<sale_id>")
def update_sale_route(sale_id: str):
    try:
        sale = sales_service.update_sale(sale_id, request.get_json(silent=True))
        current_app.logger.info("Updated sale %s", sale_id)
        return jsonify(sale), 200
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "update sale")


@sales_bp.delete("/<sale_id>")
def delete_sale_route(sale_id: str):
    try:
        sales_service.delete_sale(sale_id)
        current_app.logger.info("Deleted sale %s", sale_id)
        return "", 204
    except RecordError as exc:
        return _error_response(exc)
    except Exception as exc:
        return _internal_error(exc, "delete sale")


@sales_bp.route("", methods=["PUT", "DELETE"])
def missing_sale_id_route():
    return _error_response(InvalidArgument("Missing sale ID"))
