"""Error handling utilities for HTTP responses."""

import httpx

from infra_console_client.errors.exceptions import (
    ClientError,
    ForbiddenError,
    HTTPStatusError,
    MalformedResponseError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from infra_console_client.errors.models import Envelope


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Uses the envelope ``msg`` as detail when the error body happens to be an
    envelope, otherwise the start of the response text.

    Args:
        response: HTTP response object

    Raises:
        HTTPStatusError subclass based on status code
    """
    if response.is_success:
        return

    envelope = Envelope.from_response(response)
    status_code = response.status_code

    exception_map = {
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
    }

    # Determine exception class
    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = HTTPStatusError

    # Build error message
    if envelope is not None and envelope.msg:
        message = f"HTTP {status_code}: {envelope.msg}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        envelope=envelope,
    )


def unwrap_envelope(response: httpx.Response) -> Envelope:
    """Return the envelope of a successful response.

    Args:
        response: HTTP response with a 2xx status

    Returns:
        Parsed envelope

    Raises:
        MalformedResponseError: If the body is not JSON or lacks an integer ``code``
    """
    envelope = Envelope.from_response(response)
    if envelope is None:
        snippet = response.text[:200]
        raise MalformedResponseError(
            f"Response body is not a {{code, msg, data}} envelope: {snippet!r}",
            response=response,
        )
    return envelope
