"""Pure classification of request results.

Every request ends in exactly one of three outcomes:

| Outcome | Cause | Raised to callers as |
|---|---|---|
| `Success` | 2xx with envelope ``code == 0`` | (returns the envelope) |
| `BusinessFailure` | 2xx with envelope ``code != 0`` | `BusinessError` |
| `TransportFailure` | network fault, timeout, non-2xx, body not an envelope | the fault itself |

Nothing here performs I/O or notifies anyone.
"""

import enum
from dataclasses import dataclass
from typing import ClassVar, Literal

import httpx

from infra_console_client.errors.exceptions import BusinessError, HTTPStatusError, MalformedResponseError
from infra_console_client.errors.handler import raise_for_status, unwrap_envelope
from infra_console_client.errors.models import Envelope

OutcomeKind = Literal["success", "business", "transport"]


class RequestState(enum.Enum):
    """Lifecycle of a single request. The three final states are terminal."""

    CREATED = "created"
    SENT = "sent"
    SUCCEEDED = "succeeded"
    BUSINESS_REJECTED = "business_rejected"
    TRANSPORT_REJECTED = "transport_rejected"


@dataclass(frozen=True)
class Success:
    envelope: Envelope

    kind: ClassVar[OutcomeKind] = "success"
    state: ClassVar[RequestState] = RequestState.SUCCEEDED


@dataclass(frozen=True)
class BusinessFailure:
    """The backend answered with a non-zero code. The envelope's data is dropped."""

    code: int
    msg: str

    kind: ClassVar[OutcomeKind] = "business"
    state: ClassVar[RequestState] = RequestState.BUSINESS_REJECTED

    def to_exception(self) -> BusinessError:
        return BusinessError(self.msg, code=self.code)


@dataclass(frozen=True)
class TransportFailure:
    """The exchange itself failed; ``error`` is what callers receive."""

    error: Exception

    kind: ClassVar[OutcomeKind] = "transport"
    state: ClassVar[RequestState] = RequestState.TRANSPORT_REJECTED

    def to_exception(self) -> Exception:
        return self.error


Outcome = Success | BusinessFailure | TransportFailure


def classify_response(response: httpx.Response) -> Outcome:
    """Classify a received HTTP response.

    Args:
        response: Response returned by the transport

    Returns:
        Success, BusinessFailure, or TransportFailure for non-2xx statuses and
        bodies that are not envelopes
    """
    try:
        raise_for_status(response)
        envelope = unwrap_envelope(response)
    except (HTTPStatusError, MalformedResponseError) as e:
        return TransportFailure(e)

    if envelope.ok:
        return Success(envelope)
    return BusinessFailure(code=envelope.code, msg=envelope.msg)


def classify_fault(error: httpx.RequestError) -> TransportFailure:
    """Classify a fault raised by httpx before a usable response arrived. The fault is kept as-is."""
    return TransportFailure(error)
