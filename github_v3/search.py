"""
Search API.

GitHub API docs: https://docs.github.com/en/rest/search
"""

from typing import TYPE_CHECKING, TypeVar

from .models import (
    CodeSearchResult,
    GitHubModel,
    IssuesSearchResult,
    RepositoriesSearchResult,
    SearchOptions,
    UsersSearchResult,
)

if TYPE_CHECKING:
    from .client import GitHubClient

MEDIA_TYPE_PREVIEW = "application/vnd.github.preview"

ResultT = TypeVar("ResultT", bound=GitHubModel)


class SearchService:
    """Search across repositories, issues, users and code."""

    def __init__(self, client: "GitHubClient") -> None:
        self.client = client

    def repositories(
        self, query: str, options: SearchOptions | None = None, *, timeout: float | None = None
    ) -> RepositoriesSearchResult:
        """Search repositories."""
        return self._search("repositories", query, options, RepositoriesSearchResult, timeout)

    def issues(
        self, query: str, options: SearchOptions | None = None, *, timeout: float | None = None
    ) -> IssuesSearchResult:
        """Search issues and pull requests."""
        return self._search("issues", query, options, IssuesSearchResult, timeout)

    def users(
        self, query: str, options: SearchOptions | None = None, *, timeout: float | None = None
    ) -> UsersSearchResult:
        """Search users."""
        return self._search("users", query, options, UsersSearchResult, timeout)

    def code(
        self, query: str, options: SearchOptions | None = None, *, timeout: float | None = None
    ) -> CodeSearchResult:
        """Search file contents. Each hit names its repository."""
        return self._search("code", query, options, CodeSearchResult, timeout)

    def _search(
        self,
        kind: str,
        query: str,
        options: SearchOptions | None,
        result_type: type[ResultT],
        timeout: float | None,
    ) -> ResultT:
        # With options, every parameter is sent even when empty or zero.
        params = {"q": query}
        if options is not None:
            params.update(
                {
                    "sort": options.sort,
                    "order": options.order,
                    "page": str(options.page),
                    "per_page": str(options.per_page),
                }
            )
        request = self.client.new_request(
            "GET",
            f"search/{kind}",
            params=params,
            headers={"Accept": MEDIA_TYPE_PREVIEW},
            timeout=timeout,
        )
        result, _ = self.client.do(request, result_type)
        return result if result is not None else result_type()
