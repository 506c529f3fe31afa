"""
Typed records for GitHub v3 API payloads.

Every field is optional. A field is *present* when it was supplied, either by
the JSON the server returned or by the caller's constructor arguments, and
``to_payload()`` only encodes present fields. An absent field reads as None
but is never sent back to the server, so partial updates leave the remote
value untouched.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GitHubModel(BaseModel):
    """Base for every API record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict holding present fields only."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


UserEmail = str


class User(GitHubModel):
    """GitHub user profile."""

    login: str | None = None
    id: int | None = None
    url: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None


class FollowingUser(GitHubModel):
    """
    A user as listed among followers.

    Holds a ``User`` plus navigation URLs. The wire format is one flat object,
    so user fields are routed into ``user`` on decode and merged back on encode.
    """

    user: User = Field(default_factory=User)
    type: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def split_user_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "user" in data:
            return data
        user_fields = User.model_fields
        own = {key: value for key, value in data.items() if key not in user_fields}
        own["user"] = {key: value for key, value in data.items() if key in user_fields}
        return own

    def to_payload(self) -> dict[str, Any]:
        payload = self.user.to_payload()
        payload.update(
            self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude={"user"})
        )
        return payload


class Repository(GitHubModel):
    """Partial repository representation, as embedded in search results."""

    id: int | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    created_at: datetime | None = None
    pushed_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None
    clone_url: str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    svn_url: str | None = None
    language: str | None = None
    fork: bool | None = None
    forks_count: int | None = None
    watchers_count: int | None = None
    open_issues_count: int | None = None
    size: int | None = None
    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None


class Label(GitHubModel):
    """Issue label."""

    url: str | None = None
    name: str | None = None
    color: str | None = None


class Issue(GitHubModel):
    """Issue or pull request, as returned by issue search."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    comments: int | None = None
    closed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None


class CodeResult(GitHubModel):
    """A single code search hit."""

    name: str | None = None
    path: str | None = None
    sha: str | None = None
    html_url: str | None = None
    repository: Repository | None = None


class RepositoriesSearchResult(GitHubModel):
    """Repository search response."""

    total: int | None = Field(default=None, alias="total_count")
    repositories: list[Repository] = Field(default_factory=list, alias="items")


class IssuesSearchResult(GitHubModel):
    """Issue search response."""

    total: int | None = Field(default=None, alias="total_count")
    issues: list[Issue] = Field(default_factory=list, alias="items")


class UsersSearchResult(GitHubModel):
    """User search response."""

    total: int | None = Field(default=None, alias="total_count")
    users: list[User] = Field(default_factory=list, alias="items")


class CodeSearchResult(GitHubModel):
    """Code search response."""

    total: int | None = Field(default=None, alias="total_count")
    code_results: list[CodeResult] = Field(default_factory=list, alias="items")


class TreeEntry(GitHubModel):
    """One object in a git tree: a blob, a subtree or a submodule commit."""

    sha: str | None = None
    path: str | None = None
    mode: str | None = None
    type: str | None = None
    size: int | None = None
    content: str | None = None


class Tree(GitHubModel):
    """Git tree addressed by SHA, with entries in server order."""

    sha: str | None = None
    entries: list[TreeEntry] | None = Field(default=None, alias="tree")


class SearchOptions(BaseModel):
    """
    Optional search parameters.

    ``sort`` depends on the search kind: stars, forks or updated for
    repositories; indexed for code; comments, created or updated for issues;
    followers, repositories or joined for users. Empty means best match.
    ``order`` is asc or desc. ``per_page`` can be up to 100.
    """

    sort: str = ""
    order: str = ""
    page: int = 0
    per_page: int = 0


class UserListOptions(BaseModel):
    """Optional parameters for listing all users."""

    # ID of the last user seen
    since: int = 0


class ErrorDetail(GitHubModel):
    """
    One entry of an error body's ``errors`` list.

    GitHub usually sends objects, but some endpoints send bare strings; those
    land in ``message``.
    """

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_message(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"message": data}
        return data


class ErrorResponse(GitHubModel):
    """Error body GitHub sends with a failed request."""

    message: str | None = None
    errors: list[ErrorDetail] | None = None
    documentation_url: str | None = None
