"""Dashboard and monitoring REST API."""

from infra_console_client.errors.models import Envelope
from infra_console_client.transport.pipeline import InterceptorPipeline


class DashboardAPI:
    def __init__(self, pipeline: InterceptorPipeline):
        self._pipeline = pipeline

    async def stats(self) -> Envelope:
        """Aggregate counters for the dashboard landing page."""
        return await self._pipeline.get("/dashboard/stats")

    async def server_list(self) -> Envelope:
        return await self._pipeline.get("/server/list")

    async def server_monitor(self) -> Envelope:
        """Live utilisation figures per server."""
        return await self._pipeline.get("/server/monitor")

    async def alerts(self) -> Envelope:
        return await self._pipeline.get("/monitor/alerts")
