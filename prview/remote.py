"""
Resolve the GitHub owner/repo pair from the local repository.

Reads the first URL of the origin remote through git and accepts the two
forms GitHub hands out:
- https://github.com/owner/repo(.git)
- git@github.com:owner/repo(.git)
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import (
    MalformedRemoteError,
    NoRemoteURLError,
    RemoteNotFoundError,
    RepositoryNotFoundError,
    UnrecognizedRemoteError,
    VCSError,
)

logger = logging.getLogger(__name__)

GITHUB_HTTPS_PREFIX = "https://github.com/"
GITHUB_SSH_PREFIX = "git@github.com:"
GIT_SUFFIX = ".git"
REMOTE_NAME = "origin"


@dataclass(frozen=True)
class OwnerRepo:
    """GitHub repository identifier."""
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_remote_url(url: str) -> OwnerRepo:
    """
    Parse a GitHub remote URL into an OwnerRepo.

    Raises:
        UnrecognizedRemoteError: URL is neither the HTTPS nor SSH GitHub form
        MalformedRemoteError: path is not exactly two non-empty segments
    """
    if url.startswith(GITHUB_HTTPS_PREFIX):
        path = url[len(GITHUB_HTTPS_PREFIX):]
    elif url.startswith(GITHUB_SSH_PREFIX):
        path = url[len(GITHUB_SSH_PREFIX):]
    else:
        raise UnrecognizedRemoteError(url)

    if path.endswith(GIT_SUFFIX):
        path = path[:-len(GIT_SUFFIX)]

    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise MalformedRemoteError(url)

    return OwnerRepo(owner=parts[0], repo=parts[1])


def _git(repo_root: Path, *args: str) -> subprocess.CompletedProcess[str]:
    logger.debug("git -C %s %s", repo_root, " ".join(args))
    try:
        return subprocess.run(
            ["git", "-C", str(repo_root), *args],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise VCSError(f"Could not run git: {e}") from e


def get_remote_urls(repo_root: Path, remote: str = REMOTE_NAME) -> list[str]:
    """
    List the URLs configured for a remote, in config order.

    Only repo_root itself is checked for a .git entry; parent
    directories are not searched.
    """
    if not (repo_root / ".git").exists():
        raise RepositoryNotFoundError(str(repo_root))

    result = _git(repo_root, "remote")
    if result.returncode != 0:
        raise VCSError(f"git remote failed: {result.stderr.strip()}")
    if remote not in result.stdout.split():
        raise RemoteNotFoundError(remote)

    # --get-all exits 1 when the key is unset
    result = _git(repo_root, "config", "--get-all", f"remote.{remote}.url")
    if result.returncode not in (0, 1):
        raise VCSError(f"git config failed: {result.stderr.strip()}")

    urls = [line.strip() for line in result.stdout.splitlines() if line.strip()]
    if not urls:
        raise NoRemoteURLError(remote)
    return urls


def resolve(repo_root: Path | str = ".") -> OwnerRepo:
    """Resolve owner/repo from the first URL of the origin remote."""
    urls = get_remote_urls(Path(repo_root))
    if len(urls) > 1:
        logger.debug("Ignoring extra %s URLs: %s", REMOTE_NAME, urls[1:])
    return parse_remote_url(urls[0])
