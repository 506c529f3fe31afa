import json
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from fake_github import TOKEN, create_app
from github_v3.client import GitHubClient
from github_v3.config import Settings


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"base_url": "https://api.github.com/", "token": None}
    values.update(overrides)
    return Settings(**values)


class Recorder:
    """MockTransport handler that records requests and replays one canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = None
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is None:
            return httpx.Response(self.status_code)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert len(self.requests) == 1
        return self.requests[0]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def recorded(recorder: Recorder) -> GitHubClient:
    http_client = httpx.Client(transport=httpx.MockTransport(recorder))
    return GitHubClient(TOKEN, settings=make_settings(), http_client=http_client)


@pytest.fixture
def client() -> GitHubClient:
    return GitHubClient(TOKEN, settings=make_settings(), http_client=TestClient(create_app()))


@pytest.fixture
def anonymous() -> GitHubClient:
    return GitHubClient(settings=make_settings(), http_client=TestClient(create_app()))
