"""Infra Console Client - API client layer of the infrastructure admin console.

Every call to the console backend goes through this package:
- A configured httpx transport (base address, deadline)
- An interceptor pipeline that unwraps ``{code, msg, data}`` envelopes and
  tells business failures apart from transport failures
- Session state whose token survives restarts

Example:
    ```python
    from infra_console_client import ClientSettings, ConsoleClient
    from infra_console_client.transport import log_notifications

    async with ConsoleClient(ClientSettings.from_env()) as console:
        console.notifications.subscribe(log_notifications)
        envelope = await console.servers.list()
        for server in envelope.data:
            print(server["name"], server["status"])
    ```
"""

from infra_console_client.client import ConsoleClient
from infra_console_client.config.settings import ClientSettings
from infra_console_client.errors.exceptions import BusinessError, ConsoleAPIError
from infra_console_client.errors.models import Envelope

__version__ = "0.1.0"

__all__ = [
    "BusinessError",
    "ClientSettings",
    "ConsoleAPIError",
    "ConsoleClient",
    "Envelope",
    "__version__",
]
