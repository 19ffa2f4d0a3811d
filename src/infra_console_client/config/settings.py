"""Client settings: base address, timeout and token location."""

from dataclasses import dataclass
from urllib.parse import urlparse

from infra_console_client.config.exceptions import InvalidSettingError
from infra_console_client.config.resolver import SettingResolver

DEFAULT_BASE_ADDRESS = "http://localhost:8080/api"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_TOKEN_PATH = "~/.config/infra-console/session.json"

BASE_ADDRESS_ENV = "INFRA_CONSOLE_BASE_ADDRESS"
TIMEOUT_MS_ENV = "INFRA_CONSOLE_TIMEOUT_MS"
TOKEN_FILE_ENV = "INFRA_CONSOLE_TOKEN_FILE"
ATTACH_TOKEN_ENV = "INFRA_CONSOLE_ATTACH_TOKEN"


@dataclass(frozen=True)
class ClientSettings:
    """Configuration of the console API client.

    Attributes:
        base_address: Prefix for every relative request path.
        timeout_ms: Abort threshold for a single request, in milliseconds.
        token_path: File that persists the session token between runs.
        attach_token: Send the session token as a bearer credential.
    """

    base_address: str = DEFAULT_BASE_ADDRESS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    token_path: str = DEFAULT_TOKEN_PATH
    attach_token: bool = False

    def __post_init__(self) -> None:
        parsed = urlparse(self.base_address)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidSettingError(
                f"Base address must be an http(s) URL, got {self.base_address!r}",
                env_var_name=BASE_ADDRESS_ENV,
            )
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int) or self.timeout_ms <= 0:
            raise InvalidSettingError(
                f"Timeout must be a positive number of milliseconds, got {self.timeout_ms!r}",
                env_var_name=TIMEOUT_MS_ENV,
            )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(
        cls,
        resolver: SettingResolver | None = None,
        *,
        base_address: str | None = None,
        timeout_ms: int | None = None,
        token_path: str | None = None,
        attach_token: bool | None = None,
    ) -> "ClientSettings":
        """Build settings from explicit overrides, the environment and .env.

        Args:
            resolver: Resolver to use. Defaults to one that loads ``.env``.
            base_address: Explicit base address (wins over the environment).
            timeout_ms: Explicit timeout in milliseconds.
            token_path: Explicit token file path.
            attach_token: Explicit bearer-token switch.

        Raises:
            InvalidSettingError: If a resolved value is malformed.
        """
        resolver = resolver or SettingResolver()
        return cls(
            base_address=resolver.resolve(
                value=base_address, env_var_name=BASE_ADDRESS_ENV, default=DEFAULT_BASE_ADDRESS
            ),
            timeout_ms=resolver.resolve_int(value=timeout_ms, env_var_name=TIMEOUT_MS_ENV, default=DEFAULT_TIMEOUT_MS),
            token_path=resolver.resolve(value=token_path, env_var_name=TOKEN_FILE_ENV, default=DEFAULT_TOKEN_PATH),
            attach_token=resolver.resolve_bool(value=attach_token, env_var_name=ATTACH_TOKEN_ENV),
        )
