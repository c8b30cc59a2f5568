"""Pydantic schemas for GitHub payloads."""

from .github_webhooks import (
    GitHubRepository,
    GitHubUser,
    PullRequest,
    PullRequestEvent,
    PullRequestRef,
)
from .release import CreateReferenceRequest, CreateReleaseRequest

__all__ = [
    "CreateReferenceRequest",
    "CreateReleaseRequest",
    "GitHubRepository",
    "GitHubUser",
    "PullRequest",
    "PullRequestEvent",
    "PullRequestRef",
]
