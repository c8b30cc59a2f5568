"""Business logic services."""

from .github_client import GitHubClient
from .release import (
    ReleaseOptions,
    ReleaseRequest,
    RepositoryRef,
    Strategy,
    create_lightweight_tag,
    create_release,
    execute,
    parse_event,
    read_event,
)

__all__ = [
    "GitHubClient",
    "ReleaseOptions",
    "ReleaseRequest",
    "RepositoryRef",
    "Strategy",
    "create_lightweight_tag",
    "create_release",
    "execute",
    "parse_event",
    "read_event",
]
