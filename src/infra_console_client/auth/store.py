"""Persistent storage for the session token.

The store holds a single token string under a fixed key and survives process
restarts. Reading degrades to "no session" instead of failing: an unreadable,
missing or corrupt store yields ``""``.

Example:
    ```python
    from infra_console_client.auth import FileCredentialStore

    store = FileCredentialStore("~/.config/infra-console/session.json")
    store.save("eyJhbGciOi...")
    assert store.load() == "eyJhbGciOi..."
    store.clear()
    assert store.load() == ""
    ```
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from infra_console_client.auth.exceptions import CredentialStoreError

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


@runtime_checkable
class CredentialStore(Protocol):
    """Durable home of the session token."""

    def load(self) -> str: ...

    def save(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryCredentialStore:
    """Process-local credential store, for tests and embedded use."""

    def __init__(self, token: str = ""):
        self._token = token

    def load(self) -> str:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = ""


class FileCredentialStore:
    """Credential store backed by a small JSON file.

    The file contains ``{"token": "<value>"}``. Writes go through a temporary
    file in the same directory followed by an atomic replace, and the file is
    readable by its owner only.

    Args:
        path: File location. Supports ~ expansion and $VAR substitution.
    """

    def __init__(self, path: str | Path):
        self.path = Path(os.path.expanduser(os.path.expandvars(str(path))))

    def load(self) -> str:
        """Return the persisted token, or ``""`` if there is none or it cannot be read."""
        try:
            raw = self.path.read_text()
        except FileNotFoundError:
            logger.debug(f"No persisted session at {self.path}")
            return ""
        except PermissionError:
            logger.warning(f"Permission denied reading session file: {self.path}")
            return ""
        except OSError as e:
            logger.warning(f"Error reading session file {self.path}: {e}")
            return ""

        try:
            document = json.loads(raw)
        except ValueError:
            logger.warning(f"Ignoring corrupt session file: {self.path}")
            return ""

        token = document.get(TOKEN_KEY) if isinstance(document, dict) else None
        if not isinstance(token, str):
            logger.warning(f"Session file {self.path} has no '{TOKEN_KEY}' string, ignoring")
            return ""

        logger.debug(f"Loaded session token from file: {self.path} (***)")
        return token

    def save(self, token: str) -> None:
        """Durably write the token, replacing any previous value.

        Raises:
            CredentialStoreError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w") as fh:
                    json.dump({TOKEN_KEY: token}, fh)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.chmod(tmp_name, 0o600)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CredentialStoreError(
                f"Error writing session file {self.path}: {e}", location=str(self.path)
            ) from e

        logger.debug(f"Saved session token to file: {self.path} (***)")

    def clear(self) -> None:
        """Remove the persisted token. Clearing an absent token is a no-op.

        Raises:
            CredentialStoreError: If the file exists but cannot be removed.
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise CredentialStoreError(
                f"Error removing session file {self.path}: {e}", location=str(self.path)
            ) from e

        logger.debug(f"Cleared session file: {self.path}")
