"""Request/response interceptor pipeline.

This is where transport failures and business failures are told apart, and
where every caller's expectations about results are set:

- Success returns the full `Envelope` (callers read ``.data`` themselves, and
  ``.msg`` stays available for success messages).
- A non-zero envelope code publishes one notification carrying ``msg`` and
  raises `BusinessError` with that same message.
- A transport failure publishes one notification with a fixed text and
  raises the fault unchanged.

Example:
    ```python
    from infra_console_client.transport import InterceptorPipeline, NotificationCenter, TransportClient

    notifications = NotificationCenter()
    notifications.subscribe(lambda n: print(n.message))

    pipeline = InterceptorPipeline(TransportClient("http://localhost:8080/api", 10000), notifier=notifications)
    envelope = await pipeline.get("/servers")
    servers = envelope.data
    ```
"""

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from infra_console_client.errors.models import Envelope
from infra_console_client.transport.client import RequestHook, TransportClient
from infra_console_client.transport.notifications import (
    NETWORK_ERROR_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    Notification,
    NotificationCenter,
)
from infra_console_client.transport.outcomes import (
    BusinessFailure,
    Outcome,
    RequestState,
    Success,
    classify_fault,
    classify_response,
)

logger = logging.getLogger(__name__)


class InterceptorPipeline:
    """Wraps a `TransportClient` with request hooks and envelope handling.

    Args:
        transport: Client that performs the HTTP exchange
        request_hooks: Async callables run on each outgoing ``httpx.Request``
            (e.g. to attach headers). They must not reject the request.
            They belong to this pipeline only; other pipelines sharing the
            transport do not run them.
        notifier: Receives one notification per failed request. A private
            `NotificationCenter` is created when omitted.
    """

    def __init__(
        self,
        transport: TransportClient,
        *,
        request_hooks: Iterable[RequestHook] = (),
        notifier: NotificationCenter | None = None,
    ) -> None:
        self._transport = transport
        self.notifier = notifier if notifier is not None else NotificationCenter()
        self._request_hooks = tuple(request_hooks)

    @property
    def transport(self) -> TransportClient:
        return self._transport

    async def send(self, method: str, path: str, body: Any = None) -> Outcome:
        """Perform a request and classify its result without raising or notifying."""
        logger.debug(f"{method} {path}: {RequestState.CREATED.value} -> {RequestState.SENT.value}")
        try:
            response = await self._transport.request(method, path, body, hooks=self._request_hooks)
        except httpx.RequestError as e:
            outcome: Outcome = classify_fault(e)
        else:
            outcome = classify_response(response)
        logger.debug(f"{method} {path}: {RequestState.SENT.value} -> {outcome.state.value}")
        return outcome

    async def request(self, method: str, path: str, body: Any = None) -> Envelope:
        """Perform a request and return its envelope.

        Returns:
            Envelope with ``code == 0``

        Raises:
            BusinessError: Envelope code is non-zero (message is the envelope ``msg``)
            httpx.RequestError: Network failure, timeout or undecodable body, as raised by httpx
            HTTPStatusError: Non-2xx HTTP status
            MalformedResponseError: 2xx body that is not an envelope
        """
        outcome = await self.send(method, path, body)
        if isinstance(outcome, Success):
            return outcome.envelope

        if isinstance(outcome, BusinessFailure):
            notification = Notification(message=outcome.msg or REQUEST_FAILED_MESSAGE, kind="business")
        else:
            notification = Notification(message=NETWORK_ERROR_MESSAGE, kind="transport")
        self.notifier.publish(notification)
        raise outcome.to_exception()

    async def get(self, path: str) -> Envelope:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> Envelope:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> Envelope:
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> Envelope:
        return await self.request("DELETE", path)
