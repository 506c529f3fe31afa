"""Configuration settings for the GitHub v3 API client."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_USER_AGENT = "github-v3-python/0.1.0"


class Settings(BaseSettings):
    """Connection settings, read from ``GITHUB_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for API requests, e.g. https://ghe.example.com/api/v3/",
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User agent string for API requests",
    )

    token: str | None = Field(
        default=None,
        description="OAuth or personal access token",
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        # Relative paths resolve beneath the base only when it ends in a slash.
        return value if value.endswith("/") else value + "/"
