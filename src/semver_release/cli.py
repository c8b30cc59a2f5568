"""Command line entrypoint."""

import asyncio
import logging
from pathlib import Path

import click

from .config import get_settings
from .errors import ReleaseActionError
from .services.release import ReleaseOptions, Strategy, execute
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging verbosity. Defaults to SEMVER_RELEASE_LOG_LEVEL or INFO.",
)
@click.version_option(package_name="semver-release-action")
def main(log_level: str | None) -> None:
    """Publish semantic versions to GitHub."""
    try:
        settings = get_settings()
    except ReleaseActionError as e:
        raise click.ClickException(str(e)) from e
    setup_logging(log_level or settings.log_level)


@main.command()
@click.argument("repository")
@click.argument("target_commitish")
@click.argument("version")
@click.argument("gh_token")
@click.argument("gh_event_path", type=click.Path(path_type=Path))
@click.option(
    "--strategy",
    "-s",
    type=click.Choice([s.value for s in Strategy]),
    default=Strategy.RELEASE.value,
    show_default=True,
    help="Release strategy.",
)
def release(
    repository: str,
    target_commitish: str,
    version: str,
    gh_token: str,
    gh_event_path: Path,
    strategy: str,
) -> None:
    """
    Create a release or lightweight tag for VERSION.

    REPOSITORY is ``owner/name``. GH_EVENT_PATH points at the pull_request
    event payload whose body becomes the release notes.
    """
    options = ReleaseOptions(
        repository=repository,
        target=target_commitish,
        version=version,
        token=gh_token,
        event_path=gh_event_path,
        strategy=Strategy(strategy),
    )
    try:
        asyncio.run(execute(options))
    except ReleaseActionError as e:
        logger.debug("release action failed", exc_info=True)
        raise click.ClickException(str(e)) from e
