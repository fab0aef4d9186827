# backend/netsales/routes/system.py
"""
System health endpoint.

Reports record store connectivity so deployments can be checked without
touching the entity routes.
"""

import time
from flask import Blueprint, current_app, jsonify
from ..extensions import db
from ..models import Employee, SaleEntry

system_bp = Blueprint("system", __name__)


def check_database_health() -> dict:
    start_time = time.time()
    try:
        employee_count = db.session.query(Employee).count()
        sale_count = db.session.query(SaleEntry).count()
        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "details": {
                "employees": employee_count,
                "sales": sale_count,
            },
        }
    except Exception:
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Database health check failed")
        db.session.rollback()
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Database error",
        }


@system_bp.get("/health")
def health():
    database = check_database_health()
    status_code = 200 if database["status"] == "healthy" else 503
    return jsonify({"status": database["status"], "database": database}), status_code
