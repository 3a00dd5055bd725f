"""
Errors raised while starting a prview session.

Everything derives from PrviewError so the CLI can report any startup
failure the same way.
"""

from __future__ import annotations


class PrviewError(Exception):
    """Base error for prview."""


class VCSError(PrviewError):
    """Local repository metadata could not be read."""


class RepositoryNotFoundError(VCSError):
    """Directory is not a git repository."""
    def __init__(self, path: str):
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RemoteNotFoundError(VCSError):
    """Named remote is not configured."""
    def __init__(self, remote: str):
        super().__init__(f"Remote not found: {remote}")
        self.remote = remote


class NoRemoteURLError(VCSError):
    """Remote exists but has no URL."""
    def __init__(self, remote: str):
        super().__init__(f"Remote has no configured URL: {remote}")
        self.remote = remote


class RemoteURLError(PrviewError):
    """Remote URL does not point at a GitHub repository."""
    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class UnrecognizedRemoteError(RemoteURLError):
    """Remote URL has neither the GitHub HTTPS nor SSH prefix."""
    def __init__(self, url: str):
        super().__init__(f"Not a GitHub remote URL: {url}", url)


class MalformedRemoteError(RemoteURLError):
    """Remote path is not exactly owner/repo."""
    def __init__(self, url: str):
        super().__init__(f"Expected owner/repo in remote URL: {url}", url)


class ConfigError(PrviewError):
    """Configuration file could not be parsed."""
