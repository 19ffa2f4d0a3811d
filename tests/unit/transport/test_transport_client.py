"""Tests for the httpx transport client."""

import asyncio
import json

import httpx
import pytest

from infra_console_client.testing import envelope_response, mock_transport
from infra_console_client.transport import TransportClient

BASE = "http://console.test/api"


class TestRequests:
    @pytest.mark.unit
    async def test_prefixes_base_address(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return envelope_response()

        async with TransportClient(BASE, 1000, transport=mock_transport(handler)) as transport:
            await transport.get("/servers")
            await transport.get("/servers/7")

        assert seen == ["http://console.test/api/servers", "http://console.test/api/servers/7"]

    @pytest.mark.unit
    async def test_trailing_slash_in_base_address(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return envelope_response()

        async with TransportClient(BASE + "/", 1000, transport=mock_transport(handler)) as transport:
            await transport.get("/servers")

        assert seen == ["http://console.test/api/servers"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("verb", "method", "body"),
        [
            ("get", "GET", None),
            ("post", "POST", {"name": "web-01"}),
            ("put", "PUT", {"status": "stopped"}),
            ("delete", "DELETE", None),
        ],
    )
    async def test_verbs(self, verb, method, body):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["body"] = json.loads(request.content) if request.content else None
            return envelope_response()

        async with TransportClient(BASE, 1000, transport=mock_transport(handler)) as transport:
            operation = getattr(transport, verb)
            response = await (operation("/servers", body) if body is not None else operation("/servers"))

        assert response.status_code == 200
        assert seen == {"method": method, "body": body}

    @pytest.mark.unit
    async def test_returns_raw_response_for_error_status(self):
        """Non-2xx is a valid response at this layer."""

        async with TransportClient(BASE, 1000, transport=mock_transport(lambda r: httpx.Response(500))) as transport:
            response = await transport.get("/servers")

        assert response.status_code == 500

    @pytest.mark.unit
    async def test_sends_json_accept_header(self):
        seen = {}

        def handler(request):
            seen["accept"] = request.headers.get("Accept")
            return envelope_response()

        async with TransportClient(BASE, 1000, transport=mock_transport(handler)) as transport:
            await transport.get("/servers")

        assert seen["accept"] == "application/json"

    @pytest.mark.unit
    async def test_request_hooks_run_before_send(self):
        seen = {}

        async def add_header(request):
            request.headers["X-Trace"] = "t-1"

        def handler(request):
            seen["trace"] = request.headers.get("X-Trace")
            return envelope_response()

        async with TransportClient(BASE, 1000, transport=mock_transport(handler)) as transport:
            transport.add_request_hook(add_header)
            await transport.get("/servers")

        assert seen["trace"] == "t-1"

    @pytest.mark.unit
    async def test_per_call_hooks_apply_to_that_call_only(self):
        traces = []

        async def add_header(request):
            request.headers["X-Trace"] = "t-2"

        def handler(request):
            traces.append(request.headers.get("X-Trace"))
            return envelope_response()

        async with TransportClient(BASE, 1000, transport=mock_transport(handler)) as transport:
            await transport.request("GET", "/servers", hooks=[add_header])
            await transport.get("/servers")

        assert traces == ["t-2", None]


class TestFaults:
    @pytest.mark.unit
    async def test_timeout_raises_timeout_exception(self):
        async def never_answers(request):
            await asyncio.sleep(5)
            return envelope_response()

        async with TransportClient(BASE, 50, transport=mock_transport(never_answers)) as transport:
            with pytest.raises(httpx.TimeoutException) as exc_info:
                await transport.get("/servers")

        assert "50 ms" in str(exc_info.value)
        assert exc_info.value.request.url == "http://console.test/api/servers"

    @pytest.mark.unit
    async def test_timeout_is_a_transport_error(self):
        async def never_answers(request):
            await asyncio.sleep(5)
            return envelope_response()

        async with TransportClient(BASE, 20, transport=mock_transport(never_answers)) as transport:
            with pytest.raises(httpx.TransportError):
                await transport.get("/servers")

    @pytest.mark.unit
    async def test_connection_error_propagates(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        async with TransportClient(BASE, 1000, transport=mock_transport(refuse)) as transport:
            with pytest.raises(httpx.ConnectError):
                await transport.get("/servers")


class TestLifecycle:
    @pytest.mark.unit
    async def test_close(self):
        transport = TransportClient(BASE, 1000, transport=mock_transport(lambda r: envelope_response()))
        assert not transport.is_closed

        await transport.aclose()

        assert transport.is_closed

    @pytest.mark.unit
    def test_timeout_seconds(self):
        assert TransportClient(BASE, 2500).timeout_seconds == 2.5
