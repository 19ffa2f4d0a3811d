"""User-facing failure notifications.

The pipeline publishes one notification per failed request. A UI shows them as
toasts; a script can log them with `log_notifications`.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error"
REQUEST_FAILED_MESSAGE = "Request failed"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: Literal["business", "transport"]
    level: Literal["error", "warning", "info"] = "error"


NotificationListener = Callable[[Notification], None]


class NotificationCenter:
    """Fan-out of notifications to registered listeners, in registration order."""

    def __init__(self) -> None:
        self._listeners: list[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        """Add a listener. Returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def publish(self, notification: Notification) -> None:
        # A broken listener must not turn into a different request outcome
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception:
                logger.exception(f"Notification listener failed for {notification.kind} notification")


def log_notifications(notification: Notification) -> None:
    """Listener that writes notifications to the log."""
    level = {"error": logging.WARNING, "warning": logging.WARNING, "info": logging.INFO}[notification.level]
    logger.log(level, f"[{notification.kind}] {notification.message}")
