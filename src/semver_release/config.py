"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Ambient settings loaded from environment variables.

    Release inputs never come from here; they are positional arguments.
    """

    # GitHub API
    github_api_url: str = Field(
        "https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    request_timeout: float | None = Field(
        None,
        description="HTTP timeout in seconds for GitHub API calls (unset waits indefinitely)",
    )

    # Logging
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(env_prefix="SEMVER_RELEASE_")


@lru_cache
def get_settings() -> Settings:
    """Load settings once, reporting bad environment values as ConfigurationError."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(e) from e
