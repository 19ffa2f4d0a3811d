"""Per-resource API wrappers over the interceptor pipeline."""

from infra_console_client.resources.dashboard import DashboardAPI
from infra_console_client.resources.servers import ServersAPI

__all__ = ["DashboardAPI", "ServersAPI"]
