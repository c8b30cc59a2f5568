"""Create a GitHub release or lightweight tag from a pull request event."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import httpx
from pydantic import ValidationError

from ..errors import (
    EventOpenError,
    EventParseError,
    EventReadError,
    InvalidRepositoryError,
    ReleaseCreationError,
    TagCreationError,
    UnknownStrategyError,
)
from ..schemas.github_webhooks import PullRequestEvent
from ..schemas.release import CreateReleaseRequest
from .github_client import GitHubClient

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """What to publish for a version."""

    NONE = "none"
    RELEASE = "release"
    TAG = "tag"


@dataclass(frozen=True)
class RepositoryRef:
    """Target repository plus the token used to write to it."""

    owner: str
    name: str
    token: str

    @classmethod
    def from_full_name(cls, full_name: str, token: str) -> "RepositoryRef":
        """Build from an ``owner/name`` string."""
        parts = full_name.split("/")
        if len(parts) != 2 or not all(parts):
            raise InvalidRepositoryError(
                f"expected 'owner/name', got {full_name!r}"
            )
        return cls(owner=parts[0], name=parts[1], token=token)


@dataclass(frozen=True)
class ReleaseRequest:
    """Version to publish and the commitish it points at."""

    version: str
    target: str

    @property
    def tag_ref(self) -> str:
        return f"refs/tags/{self.version}"


@dataclass(frozen=True)
class ReleaseOptions:
    """Everything one invocation needs, as given on the command line."""

    repository: str
    target: str
    version: str
    token: str
    event_path: Path
    strategy: Strategy = Strategy.RELEASE


def read_event(path: Path) -> bytes:
    """Read the whole event file, closing it before returning."""
    try:
        f = Path(path).open("rb")
    except OSError as e:
        raise EventOpenError(e) from e

    with f:
        try:
            return f.read()
        except OSError as e:
            raise EventReadError(e) from e


def parse_event(raw: bytes) -> PullRequestEvent:
    """Decode a pull_request webhook payload."""
    try:
        return PullRequestEvent.model_validate_json(raw)
    except ValidationError as e:
        raise EventParseError(e) from e


async def create_release(
    client: GitHubClient,
    repo: RepositoryRef,
    release: ReleaseRequest,
    event: PullRequestEvent,
) -> None:
    """Create a published, non-prerelease release with the PR body as notes."""
    body = event.pull_request.body
    logger.info("Pull request body:")
    logger.info("%s", body)

    await client.create_release(
        repo.owner,
        repo.name,
        CreateReleaseRequest(
            tag_name=release.version,
            target_commitish=release.target,
            name=release.version,
            body=body,
            draft=False,
            prerelease=False,
        ),
    )


async def create_lightweight_tag(
    client: GitHubClient,
    repo: RepositoryRef,
    release: ReleaseRequest,
) -> None:
    """Point ``refs/tags/<version>`` at the target object."""
    await client.create_ref(repo.owner, repo.name, release.tag_ref, release.target)


async def execute(
    options: ReleaseOptions,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """
    Run one invocation of the release action.

    Steps:
    1. Validate the repository name
    2. Read and decode the pull request event
    3. Create the release, the tag, or nothing, depending on the strategy

    Raises a ReleaseActionError subclass naming the phase that failed.
    """
    try:
        strategy = Strategy(options.strategy)
    except ValueError as e:
        raise UnknownStrategyError(repr(options.strategy)) from e

    repo = RepositoryRef.from_full_name(options.repository, options.token)
    release = ReleaseRequest(version=options.version, target=options.target)
    event = parse_event(read_event(options.event_path))

    if strategy is Strategy.NONE:
        logger.info("Strategy is 'none', skipping %s", release.version)
        return

    async with GitHubClient(repo.token, transport=transport) as gh:
        if strategy is Strategy.RELEASE:
            try:
                await create_release(gh, repo, release, event)
            except httpx.HTTPError as e:
                raise ReleaseCreationError(_describe(e)) from e
            logger.info(
                f"Created release {release.version} in {repo.owner}/{repo.name}"
            )
        elif strategy is Strategy.TAG:
            try:
                await create_lightweight_tag(gh, repo, release)
            except httpx.HTTPError as e:
                raise TagCreationError(_describe(e)) from e
            logger.info(
                f"Created tag {release.tag_ref} at {release.target} "
                f"in {repo.owner}/{repo.name}"
            )
        else:
            raise UnknownStrategyError(repr(strategy.value))


def _describe(error: httpx.HTTPError) -> str:
    """Include GitHub's error body for status errors."""
    if isinstance(error, httpx.HTTPStatusError):
        return f"{error} {error.response.text}".strip()
    return str(error) or type(error).__name__
