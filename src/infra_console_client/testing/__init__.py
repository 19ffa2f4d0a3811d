"""Testing utilities for code built on the console client.

Example:
    ```python
    from infra_console_client import ClientSettings, ConsoleClient
    from infra_console_client.auth import MemoryCredentialStore
    from infra_console_client.testing import RecordingListener, envelope_response, mock_transport


    async def test_list_servers():
        transport = mock_transport(lambda request: envelope_response(data=[{"id": 1}]))
        console = ConsoleClient(ClientSettings(), store=MemoryCredentialStore(), transport=transport)
        recorder = RecordingListener()
        console.notifications.subscribe(recorder)

        envelope = await console.servers.list()

        assert envelope.data == [{"id": 1}]
        assert recorder.messages == []
    ```
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from infra_console_client.transport.notifications import Notification

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def envelope_response(
    code: int = 0,
    msg: str = "success",
    data: Any = None,
    status_code: int = 200,
) -> httpx.Response:
    """Build an HTTP response whose body is a ``{code, msg, data}`` envelope."""
    return httpx.Response(status_code, json={"code": code, "msg": msg, "data": data})


def mock_transport(handler: Handler) -> httpx.MockTransport:
    """Wrap a sync or async request handler in an ``httpx.MockTransport``."""

    async def dispatch(request: httpx.Request) -> httpx.Response:
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    return httpx.MockTransport(dispatch)


class RecordingListener:
    """Notification listener that keeps everything it receives."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]


__all__ = ["RecordingListener", "envelope_response", "mock_transport"]
