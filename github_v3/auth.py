from collections.abc import Generator

import httpx


class TokenAuth(httpx.Auth):
    """Attach a GitHub token to every outbound request."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"token {self.token}"
        yield request


def auth_from_token(token: str | None) -> TokenAuth | None:
    """Return token auth, or None for anonymous access."""
    if not token:
        return None
    return TokenAuth(token)
