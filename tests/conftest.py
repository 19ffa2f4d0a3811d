"""Pytest configuration and shared fixtures for infra-console-client tests."""

import pytest

from infra_console_client.auth import MemoryCredentialStore, SessionState
from infra_console_client.testing import RecordingListener
from infra_console_client.transport import InterceptorPipeline, NotificationCenter, TransportClient

BASE_ADDRESS = "http://console.test/api"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear client-related environment variables before each test.

    This prevents a developer's shell or .env file from leaking into settings tests.
    """
    import os

    test_prefixes = ("TEST_", "INFRA_CONSOLE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def store():
    return MemoryCredentialStore()


@pytest.fixture
def session(store):
    return SessionState(store)


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def make_pipeline(recorder):
    """Factory for a pipeline over a mock transport, with notifications recorded."""

    def factory(transport, *, timeout_ms=1000, request_hooks=(), auth=None):
        notifier = NotificationCenter()
        notifier.subscribe(recorder)
        client = TransportClient(BASE_ADDRESS, timeout_ms, auth=auth, transport=transport)
        return InterceptorPipeline(client, request_hooks=request_hooks, notifier=notifier)

    return factory
