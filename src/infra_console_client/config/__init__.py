"""Configuration for the console client.

Example:
    ```python
    from infra_console_client.config import ClientSettings

    settings = ClientSettings.from_env(timeout_ms=5000)
    ```
"""

from infra_console_client.config.exceptions import (
    ConfigurationError,
    InvalidSettingError,
    SettingNotFoundError,
)
from infra_console_client.config.resolver import SettingResolver
from infra_console_client.config.settings import (
    DEFAULT_BASE_ADDRESS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_TOKEN_PATH,
    ClientSettings,
)

__all__ = [
    "DEFAULT_BASE_ADDRESS",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_TOKEN_PATH",
    "ClientSettings",
    "ConfigurationError",
    "InvalidSettingError",
    "SettingNotFoundError",
    "SettingResolver",
]
