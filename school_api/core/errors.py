"""
Error taxonomy shared by the store adapter, repositories and routes.

Each error carries the HTTP status it is rendered with. Only the message
string is sent to the client as {"error": <message>}.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ServiceError):
    """Malformed id or missing required field."""

    status_code = 400


class NotFound(ServiceError):
    """No row matches the request."""

    status_code = 404


class ConstraintViolation(ServiceError):
    """Domain check, uniqueness or foreign key failure at the store."""

    status_code = 409


class StoreError(ServiceError):
    """Connectivity or query failure."""

    status_code = 500
