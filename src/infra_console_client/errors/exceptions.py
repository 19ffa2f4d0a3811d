"""Structured exceptions for console API errors.

Network faults (DNS, connection refused, timeout) are not wrapped: they reach
callers as the original ``httpx.RequestError`` raised by the transport.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from infra_console_client.errors.models import Envelope


class ConsoleAPIError(Exception):
    """Base exception for errors raised by the request pipeline."""

    pass


class BusinessError(ConsoleAPIError):
    """The backend handled the request but answered with a non-zero code.

    ``str(error)`` is the envelope's ``msg``; the envelope's ``data`` is discarded.
    """

    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.code = code

    @property
    def message(self) -> str:
        return str(self)


class HTTPStatusError(ConsoleAPIError):
    """Non-2xx HTTP response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        envelope: "Envelope | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.envelope = envelope


class ClientError(HTTPStatusError):
    """4xx client errors."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ServerError(HTTPStatusError):
    """5xx server errors."""

    pass


class MalformedResponseError(ConsoleAPIError):
    """2xx response whose body is not a ``{code, msg, data}`` envelope."""

    def __init__(self, message: str, response: "httpx.Response | None" = None):
        super().__init__(message)
        self.response = response
