"""Console client: wires settings, session, transport and resource APIs together."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from infra_console_client.auth.session import SessionState, UserProfile
from infra_console_client.auth.store import CredentialStore, FileCredentialStore
from infra_console_client.auth.token_auth import SessionTokenAuth
from infra_console_client.config.settings import ClientSettings
from infra_console_client.resources.dashboard import DashboardAPI
from infra_console_client.resources.servers import ServersAPI
from infra_console_client.transport.client import TransportClient
from infra_console_client.transport.notifications import NotificationCenter
from infra_console_client.transport.pipeline import InterceptorPipeline

logger = logging.getLogger(__name__)


class ConsoleClient:
    """Application-level entry point to the console API.

    Owns one `SessionState` and one `InterceptorPipeline`; the resource APIs
    share the pipeline.

    Args:
        settings: Client configuration. Defaults to ``ClientSettings.from_env()``.
        store: Token store. Defaults to a file store at ``settings.token_path``.
            Ignored when ``session`` is given.
        session: Pre-built session state (e.g. a fake in tests).
        transport: Underlying httpx transport, mainly ``httpx.MockTransport`` in tests.
        notifier: Notification center shared with the UI layer.

    Example:
        ```python
        async with ConsoleClient() as console:
            console.notifications.subscribe(show_toast)
            console.login(token, {"id": 1, "username": "ops", "roles": ["admin"]})
            servers = (await console.servers.list()).data
        ```
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        store: CredentialStore | None = None,
        session: SessionState | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        notifier: NotificationCenter | None = None,
    ) -> None:
        self.settings = settings or ClientSettings.from_env()
        if session is None:
            session = SessionState(store if store is not None else FileCredentialStore(self.settings.token_path))
        self.session = session
        self.notifications = notifier if notifier is not None else NotificationCenter()

        auth = SessionTokenAuth(self.session) if self.settings.attach_token else None
        self.pipeline = InterceptorPipeline(
            TransportClient(
                self.settings.base_address,
                self.settings.timeout_ms,
                auth=auth,
                transport=transport,
            ),
            notifier=self.notifications,
        )
        self.servers = ServersAPI(self.pipeline)
        self.dashboard = DashboardAPI(self.pipeline)
        logger.debug(
            f"Console client ready for {self.settings.base_address} "
            f"(timeout={self.settings.timeout_ms}ms, attach_token={self.settings.attach_token})"
        )

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def login(self, token: str, profile: UserProfile | Mapping[str, Any] | None = None) -> None:
        """Record a successful authentication: persist the token, then set the profile."""
        self.session.set_token(token)
        if profile is not None:
            self.session.set_user_info(profile)

    def logout(self) -> None:
        self.session.logout()

    async def aclose(self) -> None:
        await self.pipeline.transport.aclose()

    async def __aenter__(self) -> "ConsoleClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
