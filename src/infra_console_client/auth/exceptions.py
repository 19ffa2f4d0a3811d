"""Exceptions for credential persistence.

Example:
    ```python
    from infra_console_client.auth.exceptions import CredentialStoreError

    try:
        session.set_token(token)
    except CredentialStoreError as e:
        print(f"Token could not be saved: {e}")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialStoreError(CredentialError):
    """Raised when the token cannot be written to or removed from storage.

    Reading never raises: an unreadable store yields an empty token.

    Attributes:
        location: Description of the storage medium (e.g. the file path).
    """

    def __init__(self, message: str, location: str | None = None):
        super().__init__(message)
        self.location = location
