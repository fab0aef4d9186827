# backend/netsales/config.py
from __future__ import annotations
import os

from sqlalchemy.engine import make_url


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # Connection string for the record store; there is no default location.
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Applied when the connection string does not name a database
    DB_NAME = os.environ.get("DB_NAME", "pos_db")

    # Static admin secret (compared by equality, session-local flag only)
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "2525")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Base URL used by the client package
    API_BASE_URL = os.environ.get("NETSALES_API_URL", "http://127.0.0.1:5000")


def resolve_database_uri(uri: str | None, db_name: str | None) -> str:
    """
    Validate the store connection string and fill in the database name.

    - missing / blank uri -> ConfigError
    - uri without a database component gets DB_NAME (never for sqlite,
      where no database means in-memory)
    """
    if not uri or not uri.strip():
        raise ConfigError("DATABASE_URL is not set in environment variables.")

    uri = uri.strip()
    url = make_url(uri)
    if url.database or not db_name or url.get_backend_name() == "sqlite":
        return uri
    return url.set(database=db_name).render_as_string(hide_password=False)
