"""
GitHub v3 API client.

Builds requests against the configured base URL, sends them through a shared
``httpx.Client`` and decodes JSON responses into the records in ``models``.

Services:
- ``client.users``  - user profiles, emails and followers
- ``client.search`` - repository, issue, user and code search
- ``client.git``    - git trees
"""

import logging
import re
from functools import lru_cache
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import TypeAdapter, ValidationError

from .auth import auth_from_token
from .config import Settings
from .errors import APIError, URLParseError
from .git import GitService
from .models import ErrorResponse, GitHubModel
from .search import SearchService
from .users import UsersService

logger = logging.getLogger(__name__)

MEDIA_TYPE_V3 = "application/vnd.github.v3+json"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHAR = re.compile(r"[\x00-\x1f\x7f]")


def check_path(path: str) -> None:
    """Raise URLParseError unless ``path`` parses as a relative URL."""
    match = _BAD_ESCAPE.search(path)
    if match:
        raise URLParseError(path, f"invalid URL escape {path[match.start():match.start() + 3]!r}")
    match = _CONTROL_CHAR.search(path)
    if match:
        raise URLParseError(path, f"invalid control character {match.group()!r} in URL")
    try:
        urlsplit(path)
    except ValueError as exc:
        raise URLParseError(path, str(exc)) from exc


def check_response(response: httpx.Response) -> None:
    """Raise APIError for any status outside 200-299."""
    if 200 <= response.status_code <= 299:
        return
    error = None
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        try:
            error = ErrorResponse.model_validate(data)
        except ValidationError:
            message = data.get("message")
            error = ErrorResponse(message=message if isinstance(message, str) else None)
    raise APIError(response, error)


@lru_cache(maxsize=None)
def _adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _encode(body: Any) -> Any:
    if isinstance(body, GitHubModel):
        return body.to_payload()
    if isinstance(body, (list, tuple)):
        return [_encode(item) for item in body]
    return body


class GitHubClient:
    """
    Entry point for the API.

    An ``httpx.Client`` may be supplied to share connection pools or to swap
    the transport; otherwise one is created from ``settings`` and closed with
    the client.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.base_url = httpx.URL(self.settings.base_url)
        self.user_agent = self.settings.user_agent
        self._auth = auth_from_token(token if token is not None else self.settings.token)
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=self.settings.timeout)

        self.users = UsersService(self)
        self.search = SearchService(self)
        self.git = GitService(self)

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """
        Build a request for ``path`` relative to the base URL.

        ``body`` is encoded as JSON; records contribute their present fields only.
        """
        check_path(path)
        try:
            url = self.base_url.join(path)
        except httpx.InvalidURL as exc:
            raise URLParseError(path, str(exc)) from exc

        request_headers = {"Accept": MEDIA_TYPE_V3, "User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)

        extra: dict[str, Any] = {}
        if body is not None:
            extra["json"] = _encode(body)
        if timeout is not None:
            extra["timeout"] = timeout

        return self._http.build_request(method, url, params=params, headers=request_headers, **extra)

    def do(self, request: httpx.Request, into: Any = None) -> tuple[Any, httpx.Response]:
        """
        Send ``request`` and decode its body into ``into``.

        ``into`` is a model class or a type such as ``list[User]``. Returns the
        decoded value (None when ``into`` is None or the body is empty) and the
        raw response.
        """
        logger.debug("%s %s", request.method, request.url)
        if self._auth is not None:
            response = self._http.send(request, auth=self._auth)
        else:
            response = self._http.send(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

        check_response(response)
        if into is None or not response.content:
            return None, response
        return _adapter(into).validate_json(response.content), response
