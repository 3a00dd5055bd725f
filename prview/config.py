"""
Configuration management for prview.

Loads:
- .env: GITHUB_API_TOKEN (or GITHUB_TOKEN) for authenticated API calls
- prview.yml: optional table layout and URL opener overrides
"""

from __future__ import annotations

import os
import shlex
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigError


CONFIG_FILENAME = "prview.yml"
TOKEN_ENV_VARS = ("GITHUB_API_TOKEN", "GITHUB_TOKEN")


@dataclass
class ColumnWidths:
    """Fixed column widths for the pull request table."""
    summary: int = 35
    author: int = 20
    labels: int = 30
    date: int = 26


@dataclass
class TableConfig:
    """Table layout settings."""
    height: int = 7  # visible rows
    columns: ColumnWidths = field(default_factory=ColumnWidths)


@dataclass
class PrviewConfig:
    """Complete prview configuration."""
    table: TableConfig = field(default_factory=TableConfig)
    opener: list[str] = field(default_factory=lambda: default_opener())

    @classmethod
    def load(cls, repo_root: Path) -> "PrviewConfig":
        """Load configuration from the repository directory."""
        config_path = repo_root / CONFIG_FILENAME
        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: expected a mapping")
        return cls._parse(data)

    @classmethod
    def _parse(cls, data: dict[str, Any]) -> "PrviewConfig":
        config = cls()

        table_data = data.get("table") or {}
        if not isinstance(table_data, dict):
            raise ConfigError(f"Invalid table settings in {CONFIG_FILENAME}: expected a mapping")
        columns_data = table_data.get("columns") or {}
        try:
            config.table = TableConfig(
                height=int(table_data.get("height", 7)),
                columns=ColumnWidths(
                    summary=int(columns_data.get("summary", 35)),
                    author=int(columns_data.get("author", 20)),
                    labels=int(columns_data.get("labels", 30)),
                    date=int(columns_data.get("date", 26)),
                ),
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid table settings in {CONFIG_FILENAME}: {e}") from e

        opener = data.get("opener")
        if isinstance(opener, str) and opener.strip():
            config.opener = shlex.split(opener)
        elif isinstance(opener, list) and opener:
            config.opener = [str(part) for part in opener]
        elif opener is not None:
            raise ConfigError(f"Invalid opener in {CONFIG_FILENAME}: {opener!r}")

        return config


def default_opener(platform: str | None = None) -> list[str]:
    """Command that opens a URL with the platform's default handler."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open"]
    if platform.startswith("win"):
        return ["cmd", "/c", "start", ""]
    return ["xdg-open"]


def load_env(repo_root: Path | None = None) -> None:
    """Load .env from the current directory and the repository directory."""
    load_dotenv(Path.cwd() / ".env")
    if repo_root is not None:
        load_dotenv(repo_root / ".env")


def get_token() -> str | None:
    """GitHub token from the environment, if any."""
    for name in TOKEN_ENV_VARS:
        token = os.environ.get(name)
        if token:
            return token
    return None
