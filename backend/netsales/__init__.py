# backend/netsales/__init__.py
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config, ConfigError, resolve_database_uri
from .extensions import db, migrate


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(test_config: dict | None = None) -> Flask:
    """
    Build the API application.

    Raises ConfigError when no record store connection string is configured.
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.config["SQLALCHEMY_DATABASE_URI"] = resolve_database_uri(
        app.config.get("SQLALCHEMY_DATABASE_URI"),
        app.config.get("DB_NAME"),
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Engine is created lazily on first query; sessions are removed on app context teardown
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    from .routes.system import system_bp
    from .routes.employees import employees_bp
    from .routes.sales import sales_bp

    app.register_blueprint(system_bp)
    app.register_blueprint(employees_bp)
    app.register_blueprint(sales_bp)

    @app.before_request
    def answer_preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def add_cors_headers(response):
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        if exc.code == 405:
            message = "Method Not Allowed"
        else:
            message = exc.name
        return jsonify({"message": message}), exc.code

    from .cli import register_commands
    register_commands(app)

    return app


__all__ = ["create_app", "ConfigError"]
