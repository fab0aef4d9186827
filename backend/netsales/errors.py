# backend/netsales/errors.py
"""
Error taxonomy shared by the API boundary and the client.

Each error carries a human-readable message and the HTTP status it maps to.
"""
from __future__ import annotations


class RecordError(Exception):
    """Base class for record store and API failures."""
    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidArgument(RecordError):
    """Malformed id or bad request shape."""
    status_code = 400


class NotFound(RecordError):
    """No record matches the requested id."""
    status_code = 404


class MethodNotAllowed(RecordError):
    status_code = 405


class InternalError(RecordError):
    """Store or connectivity fault."""
    status_code = 500


_BY_STATUS = {
    400: InvalidArgument,
    404: NotFound,
    405: MethodNotAllowed,
}


def error_for_status(status_code: int, message: str, details: dict | None = None) -> RecordError:
    """Map an HTTP failure status back onto the taxonomy (anything unknown is internal)."""
    cls = _BY_STATUS.get(status_code, InternalError)
    return cls(message, details=details)
