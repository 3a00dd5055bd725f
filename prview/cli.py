"""
prview CLI - Browse the current repository's GitHub pull requests.

Resolves owner/repo from the origin remote, fetches the open pull requests
and shows them in an interactive table. Press enter to open a pull request,
esc to toggle table focus, q to quit.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import PrviewConfig, get_token, load_env
from .errors import PrviewError
from .github import GitHubClient, RateLimitError
from .remote import resolve
from .rows import build_rows
from .tui import ReviewApp

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # urllib3 is noisy at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_app(repo_root: Path) -> ReviewApp:
    """Resolve the repository, fetch its pull requests and build the UI."""
    config = PrviewConfig.load(repo_root)
    owner_repo = resolve(repo_root)
    logger.debug("Resolved %s", owner_repo.full_name)

    client = GitHubClient(token=get_token())
    prs = client.list_pulls(owner_repo.owner, owner_repo.repo)
    logger.debug("Fetched %d pull requests", len(prs))

    return ReviewApp(
        owner_repo,
        build_rows(prs),
        table_config=config.table,
        opener=config.opener,
    )


@click.command()
@click.version_option(version=__version__, prog_name="prview")
@click.option(
    "--path",
    "repo_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Repository directory",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(repo_path: Path, verbose: bool):
    """Browse GitHub pull requests for the repository in PATH.

    Keys:

        enter   open the selected pull request in the browser
        esc     toggle table focus
        q       quit
    """
    configure_logging(verbose)
    load_env(repo_path)

    try:
        app = build_app(repo_path)
    except RateLimitError as e:
        click.echo(f"Error: {e} (set GITHUB_API_TOKEN for a higher limit)", err=True)
        sys.exit(1)
    except PrviewError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    app.run()
    if app.return_code:
        sys.exit(app.return_code)


if __name__ == "__main__":
    main()
