"""Errors raised by the teacher service and their HTTP form."""

from __future__ import annotations

import logging
from http import HTTPStatus

log = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Please provide valid json input"


class ServiceError(Exception):
    """Base class for errors the service reports to its clients."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    label: str = "Server error"
    public_message: str | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def status_code(self) -> int:
        """The HTTP status code this error is reported with."""
        return int(self.status)

    def response_message(self) -> str:
        """Log the error and return the message shown to the client."""
        log.error("%s occurred: %r", self.label, self.message)
        if self.public_message is not None:
            return self.public_message
        return self.message

    def to_response(self) -> tuple[dict[str, str], int]:
        """The JSON body and status code of the error response."""
        return {"error_message": self.response_message()}, self.status_code()


class DBError(ServiceError):
    """A database operation failed."""

    label = "Database error"
    public_message = "Database error"


class ServerError(ServiceError):
    """The web framework failed while serving a request."""

    label = "Server error"
    public_message = "Internal server error"


class NotFoundError(ServiceError):
    """The requested record does not exist."""

    status = HTTPStatus.NOT_FOUND
    label = "Not found error"


class InvalidInputError(ServiceError):
    """The request carried input that could not be accepted."""

    status = HTTPStatus.BAD_REQUEST
    label = "Invalid input error"