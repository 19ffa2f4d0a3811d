"""In-memory session state synchronized with a credential store.

The session holds the token and the signed-in user's profile. Only the token
is persisted; the profile has to be fetched again after a restart by whoever
owns the login flow.

Example:
    ```python
    from infra_console_client.auth import FileCredentialStore, SessionState, UserProfile

    session = SessionState(FileCredentialStore("~/.config/infra-console/session.json"))
    if not session.is_authenticated:
        session.set_token(token_from_login)
        session.set_user_info(UserProfile(id=7, username="ops", roles=frozenset({"admin"})))

    session.logout()
    ```
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Literal

from infra_console_client.auth.exceptions import CredentialStoreError
from infra_console_client.auth.store import CredentialStore

logger = logging.getLogger(__name__)

SessionEventType = Literal["token_changed", "profile_changed", "logout"]


@dataclass(frozen=True)
class UserProfile:
    """Identity of the signed-in user. The default instance is the anonymous identity."""

    id: int = 0
    username: str = ""
    nickname: str = ""
    avatar: str = ""
    roles: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserProfile":
        """Build a profile from a backend user document.

        Missing or null fields fall back to the anonymous values. A single role
        given as a bare string is treated as one role, not as its characters.
        """
        roles: Iterable[str] = data.get("roles") or ()
        if isinstance(roles, str):
            roles = (roles,)
        return cls(
            id=int(data.get("id") or 0),
            username=str(data.get("username") or ""),
            nickname=str(data.get("nickname") or ""),
            avatar=str(data.get("avatar") or ""),
            roles=frozenset(str(role) for role in roles),
        )

    def has_role(self, role: str) -> bool:
        return role in self.roles


ANONYMOUS = UserProfile()


@dataclass(frozen=True)
class SessionEvent:
    """A change of session state, delivered to subscribers after the change is applied."""

    type: SessionEventType
    token: str
    profile: UserProfile


SessionListener = Callable[[SessionEvent], None]


class SessionState:
    """Token and profile of the current user.

    Mutations are serialized by a lock, so token and profile always change as
    a consistent pair. Subscribers are notified outside the lock, in
    registration order.

    Args:
        store: Durable home of the token. Read once at construction.
    """

    def __init__(self, store: CredentialStore):
        self._store = store
        self._lock = Lock()
        self._listeners: list[SessionListener] = []
        self._token = ""
        self._profile = ANONYMOUS
        self.initialize()

    def initialize(self) -> None:
        """Seed the token from the store; the profile starts anonymous."""
        token = self._store.load()
        with self._lock:
            self._token = token
            self._profile = ANONYMOUS
        logger.debug(f"Session initialized (authenticated={bool(token)})")

    @property
    def token(self) -> str:
        return self._token

    @property
    def profile(self) -> UserProfile:
        return self._profile

    @property
    def is_authenticated(self) -> bool:
        return self._token != ""

    def snapshot(self) -> tuple[str, UserProfile]:
        """Return token and profile as one consistent pair."""
        with self._lock:
            return self._token, self._profile

    def set_token(self, token: str) -> None:
        """Persist the token and make it current. Call after every successful login.

        Raises:
            CredentialStoreError: If the token cannot be persisted; the
                in-memory token is left unchanged in that case.
        """
        with self._lock:
            self._store.save(token)
            self._token = token
            event = SessionEvent("token_changed", self._token, self._profile)
        logger.debug("Session token updated (***)")
        self._emit(event)

    def set_user_info(self, profile: UserProfile | Mapping[str, Any]) -> None:
        """Replace the profile wholesale. Partial updates are not merged."""
        if not isinstance(profile, UserProfile):
            profile = UserProfile.from_dict(profile)
        with self._lock:
            self._profile = profile
            event = SessionEvent("profile_changed", self._token, self._profile)
        logger.debug(f"Session profile set for user id={profile.id}")
        self._emit(event)

    def logout(self) -> None:
        """Forget token and profile, and remove the persisted token.

        The in-memory reset always happens.

        Raises:
            CredentialStoreError: If the persisted token cannot be removed.
        """
        error: CredentialStoreError | None = None
        with self._lock:
            self._token = ""
            self._profile = ANONYMOUS
            try:
                self._store.clear()
            except CredentialStoreError as e:
                error = e
        logger.debug("Session cleared")

        # subscribers see the reset even when storage failed
        self._emit(SessionEvent("logout", "", ANONYMOUS))
        if error is not None:
            logger.warning(f"Persisted session could not be removed: {error}")
            raise error

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener for session changes. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Session listener failed on {event.type} event")
