"""Audit error taxonomy."""

from enum import Enum

SERVER_MESSAGE = "Could not connect to the audit server. Is it running?"
VALIDATION_MESSAGE = "Please enter a valid Google Maps share link."


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    SERVER = "server"
    CONNECTIVITY = "connectivity"


class AuditError(Exception):
    """Base error for a failed audit. ``message`` is safe to show to the user."""

    kind: ErrorKind

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(detail or message)
        self.message = message


class ValidationError(AuditError):
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = VALIDATION_MESSAGE, detail: str | None = None):
        super().__init__(message, detail)


class ServerError(AuditError):
    kind = ErrorKind.SERVER

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(SERVER_MESSAGE, detail)
        self.status_code = status_code


class ConnectivityError(AuditError):
    kind = ErrorKind.CONNECTIVITY

    def __init__(self, detail: str):
        super().__init__(SERVER_MESSAGE, detail)
