"""HTTP transport for the console API.

A thin wrapper over ``httpx.AsyncClient`` configured with a base address and a
per-request deadline. It returns raw responses and raises raw transport
faults; envelope handling happens in the pipeline.

Example:
    ```python
    from infra_console_client.transport import TransportClient

    async with TransportClient("http://localhost:8080/api", timeout_ms=10000) as transport:
        response = await transport.get("/servers")
    ```
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RequestHook = Callable[[httpx.Request], Awaitable[None]]


async def _log_request(request: httpx.Request) -> None:
    logger.debug(f"Sending {request.method} {request.url}")


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug(f"Received {response.status_code} for {request.method} {request.url}")


class TransportClient:
    """Single-attempt HTTP client with a base address and a timeout.

    The timeout is enforced as one deadline around the whole exchange (httpx's
    own timeouts apply per phase). When it fires the request is abandoned and
    ``httpx.TimeoutException`` is raised, like any other transport fault.

    Args:
        base_address: Prefix prepended to every relative path
        timeout_ms: Abort threshold in milliseconds
        auth: Optional httpx auth flow applied to every request
        transport: Optional underlying httpx transport (e.g. ``httpx.MockTransport``)
        headers: Extra default headers
    """

    def __init__(
        self,
        base_address: str,
        timeout_ms: int,
        *,
        auth: httpx.Auth | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_address = base_address.rstrip("/")
        self.timeout_ms = timeout_ms
        self._client = httpx.AsyncClient(
            base_url=self.base_address,
            timeout=self.timeout_seconds,
            auth=auth,
            transport=transport,
            headers={"Accept": "application/json", **(headers or {})},
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def add_request_hook(self, hook: RequestHook) -> None:
        """Run ``hook`` on every outgoing request before it is sent."""
        hooks = self._client.event_hooks
        hooks["request"] = [*hooks["request"], hook]
        self._client.event_hooks = hooks

    async def request(
        self, method: str, path: str, body: Any = None, *, hooks: Iterable[RequestHook] = ()
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Args:
            method: HTTP verb
            path: Path relative to the base address
            body: JSON-serializable request body, or None for no body
            hooks: Request hooks for this call only, run before the request is sent

        Returns:
            The HTTP response, whatever its status code

        Raises:
            httpx.RequestError: On connection failure, DNS failure, timeout or a body
                that cannot be decoded
        """
        request = self._client.build_request(method, path, json=body)
        for hook in hooks:
            await hook(request)
        try:
            return await asyncio.wait_for(self._client.send(request), timeout=self.timeout_seconds)
        except TimeoutError:
            raise httpx.TimeoutException(
                f"No response within {self.timeout_ms} ms", request=request
            ) from None

    async def get(self, path: str) -> httpx.Response:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> httpx.Response:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TransportClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
