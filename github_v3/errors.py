import httpx

from .models import ErrorDetail, ErrorResponse


class GitHubError(Exception):
    """Base class for errors raised by this library."""


class URLParseError(GitHubError, ValueError):
    """A request path could not be parsed. Raised before any network call."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"parse {path!r}: {reason}")
        self.path = path
        self.reason = reason


class APIError(GitHubError):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, response: httpx.Response, error: ErrorResponse | None = None) -> None:
        error = error or ErrorResponse()
        self.response = response
        self.status_code = response.status_code
        self.message = error.message
        self.errors: list[ErrorDetail] = list(error.errors or [])
        self.documentation_url = error.documentation_url
        super().__init__(str(self))

    def __str__(self) -> str:
        request = self.response.request
        details = [error.to_payload() for error in self.errors]
        return f"{request.method} {request.url}: {self.status_code} {self.message or ''} {details}"
