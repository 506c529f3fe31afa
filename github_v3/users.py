"""
Users API: profiles, email addresses and followers.

GitHub API docs: https://docs.github.com/en/rest/users
"""

from typing import TYPE_CHECKING

from .errors import APIError
from .models import FollowingUser, User, UserEmail, UserListOptions

if TYPE_CHECKING:
    from .client import GitHubClient


class UsersService:
    """Operations on user profiles, email addresses and followers."""

    def __init__(self, client: "GitHubClient") -> None:
        self.client = client

    def get(self, user: str = "", *, timeout: float | None = None) -> User:
        """Fetch a user. The empty string fetches the authenticated user."""
        path = f"users/{user}" if user else "user"
        request = self.client.new_request("GET", path, timeout=timeout)
        result, _ = self.client.do(request, User)
        return result if result is not None else User()

    def edit(self, user: User, *, timeout: float | None = None) -> User:
        """Update the authenticated user with the fields present on ``user``."""
        request = self.client.new_request("PATCH", "user", user, timeout=timeout)
        result, _ = self.client.do(request, User)
        return result if result is not None else User()

    def list_all(self, options: UserListOptions | None = None, *, timeout: float | None = None) -> list[User]:
        """List all users, in signup order, starting after ``options.since``."""
        params = None
        if options is not None:
            params = {"since": str(options.since)}
        request = self.client.new_request("GET", "users", params=params, timeout=timeout)
        result, _ = self.client.do(request, list[User])
        return result or []

    def list_emails(self, *, timeout: float | None = None) -> list[UserEmail]:
        """List the authenticated user's email addresses."""
        request = self.client.new_request("GET", "user/emails", timeout=timeout)
        result, _ = self.client.do(request, list[UserEmail])
        return result or []

    def add_emails(self, emails: list[UserEmail], *, timeout: float | None = None) -> list[UserEmail]:
        """Add addresses to the authenticated user. Returns the full address list."""
        request = self.client.new_request("POST", "user/emails", list(emails), timeout=timeout)
        result, _ = self.client.do(request, list[UserEmail])
        return result or []

    def delete_emails(self, emails: list[UserEmail], *, timeout: float | None = None) -> None:
        """Remove addresses from the authenticated user."""
        request = self.client.new_request("DELETE", "user/emails", list(emails), timeout=timeout)
        self.client.do(request)

    def list_followers(self, user: str = "", *, timeout: float | None = None) -> list[FollowingUser]:
        """List followers of ``user``, or of the authenticated user when empty."""
        path = f"users/{user}/followers" if user else "user/followers"
        request = self.client.new_request("GET", path, timeout=timeout)
        result, _ = self.client.do(request, list[FollowingUser])
        return result or []

    def is_following(self, user: str, *, timeout: float | None = None) -> bool:
        """
        Report whether the authenticated user follows ``user``.

        202 and 204 mean yes, 404 means no. Any other status raises APIError,
        and transport failures propagate as raised by httpx.
        """
        request = self.client.new_request("GET", f"user/following/{user}", timeout=timeout)
        try:
            _, response = self.client.do(request)
        except APIError as exc:
            if exc.status_code == 404:
                return False
            raise
        if response.status_code in (202, 204):
            return True
        raise APIError(response)
