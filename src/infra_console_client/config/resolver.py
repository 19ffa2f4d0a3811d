"""Multi-source setting resolution for the console client.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from infra_console_client.config import SettingResolver

    resolver = SettingResolver()

    base_address = resolver.resolve(
        env_var_name="INFRA_CONSOLE_BASE_ADDRESS",
        default="http://localhost:8080/api",
    )
    timeout_ms = resolver.resolve_int(env_var_name="INFRA_CONSOLE_TIMEOUT_MS", default=10000)
    ```

Security Considerations:
    - Sensitive values are never logged in full (masked with ***)
    - Only source information is logged (env var name, etc.)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from infra_console_client.config.exceptions import InvalidSettingError, SettingNotFoundError

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset(["1", "true", "yes", "on"])
_FALSE_VALUES = frozenset(["0", "false", "no", "off", ""])


class SettingResolver:
    """Resolve settings from explicit values, the environment, .env files and defaults.

    Values loaded from the .env file end up in ``os.environ`` (python-dotenv never
    overrides variables that are already set), so the environment lookup covers
    both sources.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize setting resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all. Disable in tests.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            # Double-check pattern for thread safety
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for setting resolution")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way; a broken .env never blocks startup
            self._dotenv_loaded = True

    @staticmethod
    def _mask(value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = False,
    ) -> str | None:
        """Resolve a setting from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: Raise SettingNotFoundError when nothing resolves.
            mask_in_logs: Mask the value in debug logs (use for secrets).

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            SettingNotFoundError: If required=True and the setting is missing.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask(result) if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required setting not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise SettingNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_int(
        self,
        *,
        value: int | str | None = None,
        env_var_name: str | None = None,
        default: int | None = None,
    ) -> int | None:
        """Resolve an integer setting.

        Raises:
            InvalidSettingError: If the resolved value is not an integer.
        """
        raw = self.resolve(
            value=None if value is None else str(value),
            env_var_name=env_var_name,
            default=None if default is None else str(default),
        )
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidSettingError(
                f"Expected an integer, got {raw!r}", env_var_name=env_var_name
            ) from None

    def resolve_bool(
        self,
        *,
        value: bool | None = None,
        env_var_name: str | None = None,
        default: bool = False,
    ) -> bool:
        """Resolve a boolean flag (1/0, true/false, yes/no, on/off).

        Raises:
            InvalidSettingError: If the resolved value is not a recognised flag.
        """
        if value is not None:
            return value

        raw = self.resolve(env_var_name=env_var_name)
        if raw is None:
            return default

        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise InvalidSettingError(f"Expected a boolean flag, got {raw!r}", env_var_name=env_var_name)
