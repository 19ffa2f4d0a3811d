"""Session and credential handling for the console client.

This module provides:
- Durable token storage (file-backed or in-memory)
- Session state with login/logout lifecycle and change notifications
- An httpx auth flow that attaches the session token

Example:
    ```python
    from infra_console_client.auth import FileCredentialStore, SessionState

    session = SessionState(FileCredentialStore("~/.config/infra-console/session.json"))
    session.set_token("abc")
    ```
"""

from infra_console_client.auth.exceptions import CredentialError, CredentialStoreError
from infra_console_client.auth.session import (
    ANONYMOUS,
    SessionEvent,
    SessionState,
    UserProfile,
)
from infra_console_client.auth.store import (
    TOKEN_KEY,
    CredentialStore,
    FileCredentialStore,
    MemoryCredentialStore,
)
from infra_console_client.auth.token_auth import SessionTokenAuth

__all__ = [
    "ANONYMOUS",
    "TOKEN_KEY",
    "CredentialError",
    "CredentialStore",
    "CredentialStoreError",
    "FileCredentialStore",
    "MemoryCredentialStore",
    "SessionEvent",
    "SessionState",
    "SessionTokenAuth",
    "UserProfile",
]
