"""
Project pull requests into table rows.

Each DisplayRow keeps the GitHubPR it was built from, so the table and
the records it opens are a single sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .github import GitHubPR


COLUMN_TITLES = ("Summary", "Author", "Labels", "Date")
LABEL_SEPARATOR = ", "

# Fixed English names; strftime's %a/%b follow the process locale.
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_created_at(dt: datetime | None) -> str:
    """Format as "Mon Jan 2 15:04 UTC 2006"."""
    if dt is None:
        return ""
    zone = dt.tzname() or ""
    parts = [
        WEEKDAYS[dt.weekday()],
        MONTHS[dt.month - 1],
        str(dt.day),
        f"{dt.hour:02d}:{dt.minute:02d}",
    ]
    if zone:
        parts.append(zone)
    parts.append(f"{dt.year:04d}")
    return " ".join(parts)


@dataclass(frozen=True)
class DisplayRow:
    """A pull request together with its rendered cells."""
    pull: GitHubPR
    title: str
    author: str
    labels: str
    date: str

    @property
    def url(self) -> str:
        return self.pull.html_url

    @property
    def cells(self) -> tuple[str, str, str, str]:
        return (self.title, self.author, self.labels, self.date)

    @classmethod
    def from_pull(cls, pr: GitHubPR) -> "DisplayRow":
        return cls(
            pull=pr,
            title=pr.title or "",
            author=pr.author or "",
            labels=LABEL_SEPARATOR.join(pr.labels),
            date=format_created_at(pr.created_at),
        )


def build_rows(prs: list[GitHubPR]) -> list[DisplayRow]:
    """Build one row per pull request, preserving order."""
    return [DisplayRow.from_pull(pr) for pr in prs]
