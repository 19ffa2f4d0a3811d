"""Exceptions raised while resolving client configuration.

Example:
    ```python
    from infra_console_client.config.exceptions import InvalidSettingError

    if timeout_ms <= 0:
        raise InvalidSettingError("timeout must be positive", env_var_name="INFRA_CONSOLE_TIMEOUT_MS")
    ```
"""


class ConfigurationError(Exception):
    """Base exception for configuration errors.

    Attributes:
        env_var_name: The environment variable involved (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class SettingNotFoundError(ConfigurationError):
    """Raised when a required setting cannot be resolved from any source."""

    pass


class InvalidSettingError(ConfigurationError):
    """Raised when a setting resolves to a value of the wrong shape."""

    pass
