"""Diff service errors, each mapped to one HTTP outcome in main.py"""

from __future__ import annotations


class DiffServiceError(Exception):
    """Base error for the diff service"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class MalformedInput(DiffServiceError):
    """Submission body missing required fields or not parseable"""

    status_code = 400
    message = "Unexpected end of JSON input"


class NoChangeDetected(DiffServiceError):
    """Both versions are identical line for line"""

    status_code = 404
    message = "Data not changed"


class RecordNotFound(DiffServiceError):
    """Identifier unknown to the store, or not a valid identifier at all"""

    status_code = 404
    message = "Data or Route not found"


class StoreUnavailable(DiffServiceError):
    """The record store failed a put/get call"""

    status_code = 503
    message = "Diff store unavailable"
