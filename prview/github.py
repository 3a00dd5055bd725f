"""
GitHub REST API client for prview.

Fetches the first page of pull requests for a repository.
Uses GITHUB_API_TOKEN (or GITHUB_TOKEN) for authentication when present;
otherwise requests are anonymous and subject to the lower rate limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests

from . import __version__
from .errors import PrviewError

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
REQUEST_TIMEOUT = 30


@dataclass
class GitHubPR:
    """Parsed GitHub PR data."""
    number: int
    title: str | None
    author: str | None
    labels: list[str]
    created_at: datetime | None
    html_url: str


class GitHubAPIError(PrviewError):
    """Error from GitHub API."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(GitHubAPIError):
    """Rate limit exceeded."""
    def __init__(self, reset_time: int | None = None):
        super().__init__("GitHub API rate limit exceeded", 403)
        self.reset_time = reset_time


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp ("2024-01-02T15:04:05Z")."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable timestamp: %s", value)
        return None


class GitHubClient:
    """GitHub REST API client."""

    def __init__(self, token: str | None = None):
        self.token = token
        self.session = requests.Session()

        if self.token:
            self.session.headers["Authorization"] = f"token {self.token}"

        self.session.headers["Accept"] = "application/vnd.github.v3+json"
        self.session.headers["User-Agent"] = f"prview/{__version__}"

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Make a single API request, mapping failures to GitHubAPIError."""
        url = f"{GITHUB_API_BASE}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(
                method, url, params=params, timeout=REQUEST_TIMEOUT, **kwargs
            )
        except requests.RequestException as e:
            raise GitHubAPIError(f"Request failed: {e}") from e

        if response.status_code in (403, 429):
            remaining = response.headers.get("X-RateLimit-Remaining")
            if remaining == "0":
                reset_time = int(response.headers.get("X-RateLimit-Reset", 0))
                raise RateLimitError(reset_time)

        if response.status_code >= 400:
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {response.text}",
                response.status_code
            )

        return response

    def list_pulls(self, owner: str, repo: str) -> list[GitHubPR]:
        """
        List pull requests for a repository.

        Only the first page is fetched, with the API's default state
        (open), sort and page size. Later pages are not requested.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            List of GitHubPR objects in API order
        """
        endpoint = f"/repos/{owner}/{repo}/pulls"
        response = self._request("GET", endpoint)

        try:
            items = response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from GitHub: {e}") from e
        if not isinstance(items, list):
            raise GitHubAPIError("Unexpected response listing pull requests")

        return [self._parse_pr(item) for item in items]

    def _parse_pr(self, data: dict[str, Any]) -> GitHubPR:
        """Parse raw PR data into GitHubPR object."""
        user = data.get("user")
        labels = data.get("labels") or []

        return GitHubPR(
            number=data.get("number", 0),
            title=data.get("title"),
            author=user.get("login") if user else None,
            labels=[label.get("name") or "" for label in labels],
            created_at=parse_timestamp(data.get("created_at")),
            html_url=data.get("html_url") or "",
        )
