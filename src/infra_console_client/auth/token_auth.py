"""Request-phase hook that attaches the session token."""

from collections.abc import Generator

import httpx

from infra_console_client.auth.session import SessionState


class SessionTokenAuth(httpx.Auth):
    """httpx auth flow that sends the current session token.

    The token is read at send time, so a login or logout between two requests
    takes effect on the next one. Unauthenticated sessions send no header.

    Args:
        session: Session whose token is attached
        scheme: Authorization scheme prefix (default: "Bearer")
        header: Header name (default: "Authorization")
    """

    def __init__(self, session: SessionState, scheme: str = "Bearer", header: str = "Authorization"):
        self._session = session
        self.scheme = scheme
        self.header = header

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._session.token
        if token:
            request.headers[self.header] = f"{self.scheme} {token}" if self.scheme else token
        yield request
