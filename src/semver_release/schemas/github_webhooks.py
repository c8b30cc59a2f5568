"""Pydantic models for GitHub webhook payloads."""

from pydantic import BaseModel, ConfigDict


class GitHubUser(BaseModel):
    """GitHub user or organization."""

    model_config = ConfigDict(extra="ignore")

    login: str
    id: int | None = None
    type: str = "User"  # "User" or "Organization"


class GitHubRepository(BaseModel):
    """GitHub repository info."""

    model_config = ConfigDict(extra="ignore")

    full_name: str
    name: str | None = None
    default_branch: str = "main"


class PullRequestRef(BaseModel):
    """PR head or base branch info."""

    model_config = ConfigDict(extra="ignore")

    sha: str
    ref: str | None = None


class PullRequest(BaseModel):
    """Pull request details.

    Only ``body`` is consumed. It is used verbatim as release notes.
    """

    model_config = ConfigDict(extra="ignore")

    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    merged: bool | None = None
    head: PullRequestRef | None = None
    base: PullRequestRef | None = None


class PullRequestEvent(BaseModel):
    """Webhook payload for pull_request events."""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    number: int | None = None
    pull_request: PullRequest
    repository: GitHubRepository | None = None
    sender: GitHubUser | None = None
