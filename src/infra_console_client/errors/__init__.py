"""Error taxonomy and envelope handling for console API calls."""

from infra_console_client.errors.exceptions import (
    BusinessError,
    ClientError,
    ConsoleAPIError,
    ForbiddenError,
    HTTPStatusError,
    MalformedResponseError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from infra_console_client.errors.handler import raise_for_status, unwrap_envelope
from infra_console_client.errors.models import SUCCESS_CODE, Envelope

__all__ = [
    "SUCCESS_CODE",
    "BusinessError",
    "ClientError",
    "ConsoleAPIError",
    "Envelope",
    "ForbiddenError",
    "HTTPStatusError",
    "MalformedResponseError",
    "NotFoundError",
    "ServerError",
    "UnauthorizedError",
    "raise_for_status",
    "unwrap_envelope",
]
