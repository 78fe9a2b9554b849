"""Errors raised by the web front end and their HTTP form."""

from __future__ import annotations

import logging
from http import HTTPStatus

log = logging.getLogger(__name__)


class WebAppError(Exception):
    """Base class for errors the front end reports to the browser."""

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


class ServerError(WebAppError):
    """The server failed while handling a request."""

    label = "Server error"
    public_message = "Internal server error"


class NotFoundError(WebAppError):
    """The requested resource does not exist."""

    status = HTTPStatus.NOT_FOUND
    label = "Not found error"


class TemplateError(WebAppError):
    """A page template could not be rendered."""

    label = "Error in rendering the template"