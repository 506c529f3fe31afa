"""
Git data API: trees.

GitHub API docs: https://docs.github.com/en/rest/git/trees
"""

from typing import TYPE_CHECKING

from pydantic import Field

from .models import GitHubModel, Tree, TreeEntry

if TYPE_CHECKING:
    from .client import GitHubClient


class _CreateTree(GitHubModel):
    """Request body for creating a tree."""

    base_tree: str
    entries: list[TreeEntry] = Field(alias="tree")


class GitService:
    """Git tree operations on a repository."""

    def __init__(self, client: "GitHubClient") -> None:
        self.client = client

    def get_tree(
        self, owner: str, repo: str, sha: str, recursive: bool = False, *, timeout: float | None = None
    ) -> Tree:
        """Fetch the tree ``sha``. ``recursive`` flattens nested subtrees into one list."""
        params = {"recursive": "1"} if recursive else None
        request = self.client.new_request(
            "GET", f"repos/{owner}/{repo}/git/trees/{sha}", params=params, timeout=timeout
        )
        result, _ = self.client.do(request, Tree)
        return result if result is not None else Tree()

    def create_tree(
        self, owner: str, repo: str, base_tree: str, entries: list[TreeEntry], *, timeout: float | None = None
    ) -> Tree:
        """Create a tree from ``entries`` on top of ``base_tree``."""
        body = _CreateTree(base_tree=base_tree, entries=list(entries))
        request = self.client.new_request("POST", f"repos/{owner}/{repo}/git/trees", body, timeout=timeout)
        result, _ = self.client.do(request, Tree)
        return result if result is not None else Tree()
