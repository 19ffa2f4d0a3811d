"""HTTP transport and the interceptor pipeline built on it.

Modules:
    client: httpx-based transport with base address and deadline
    outcomes: Pure classification of responses and faults
    notifications: Failure notifications and their listeners
    pipeline: Request hooks, envelope unwrapping and error propagation

Example:
    ```python
    from infra_console_client.transport import InterceptorPipeline, TransportClient

    pipeline = InterceptorPipeline(TransportClient("http://localhost:8080/api", timeout_ms=10000))
    envelope = await pipeline.get("/servers")
    ```
"""

from infra_console_client.transport.client import RequestHook, TransportClient
from infra_console_client.transport.notifications import (
    NETWORK_ERROR_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    Notification,
    NotificationCenter,
    log_notifications,
)
from infra_console_client.transport.outcomes import (
    BusinessFailure,
    Outcome,
    RequestState,
    Success,
    TransportFailure,
    classify_fault,
    classify_response,
)
from infra_console_client.transport.pipeline import InterceptorPipeline

__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "REQUEST_FAILED_MESSAGE",
    "BusinessFailure",
    "InterceptorPipeline",
    "Notification",
    "NotificationCenter",
    "Outcome",
    "RequestHook",
    "RequestState",
    "Success",
    "TransportClient",
    "TransportFailure",
    "classify_fault",
    "classify_response",
    "log_notifications",
]
