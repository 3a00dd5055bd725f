from __future__ import annotations

import asyncio
from unittest.mock import patch

from textual.widgets import DataTable

from prview.config import ColumnWidths, TableConfig, default_opener
from prview.github import GitHubPR
from prview.remote import OwnerRepo
from prview.rows import build_rows
from prview.session import FocusState
from prview.tui import ReviewApp


REPO = OwnerRepo("acme", "widgets")


def _rows(count):
    return build_rows([
        GitHubPR(
            number=n,
            title=f"PR {n}",
            author="alice",
            labels=["bug", "P1"],
            created_at=None,
            html_url=f"https://github.com/acme/widgets/pull/{n}",
        )
        for n in range(1, count + 1)
    ])


def _drive(app, *keys):
    """Press keys in a headless app and report what happened."""
    async def run():
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)
            await pilot.pause()
            table = app.query_one("#pulls", DataTable)
            return {
                "cursor": app.cursor,
                "state": app.focus_state,
                "row_count": table.row_count,
                "table_focused": app.focused is table,
            }

    return asyncio.run(run())


def test_table_shows_one_row_per_pull():
    app = ReviewApp(REPO, _rows(3))
    result = _drive(app)
    assert result["row_count"] == 3
    assert result["state"] is FocusState.FOCUSED
    assert result["table_focused"]


def test_table_with_no_pulls():
    app = ReviewApp(REPO, [])
    with patch("prview.tui.subprocess.run") as run:
        result = _drive(app, "enter")
    assert result["row_count"] == 0
    run.assert_not_called()


def test_enter_opens_pull_under_cursor():
    rows = _rows(3)
    app = ReviewApp(REPO, rows, opener=["xdg-open"])

    with patch("prview.tui.subprocess.run") as run:
        result = _drive(app, "down", "enter")

    assert result["cursor"] == 1
    run.assert_called_once()
    assert run.call_args.args[0] == ["xdg-open", rows[1].url]


def test_default_opener_follows_platform():
    rows = _rows(1)
    app = ReviewApp(REPO, rows)

    with patch("prview.tui.subprocess.run") as run:
        _drive(app, "enter")

    assert app.opener == default_opener()
    assert run.call_args.args[0] == [*default_opener(), rows[0].url]


def test_default_opener_on_macos():
    with patch("prview.config.sys.platform", "darwin"):
        app = ReviewApp(REPO, _rows(1))
    assert app.opener == ["open"]


def test_enter_uses_configured_opener():
    rows = _rows(1)
    app = ReviewApp(REPO, rows, opener=["open", "-a", "Safari"])

    with patch("prview.tui.subprocess.run") as run:
        _drive(app, "enter")

    assert run.call_args.args[0] == ["open", "-a", "Safari", rows[0].url]


def test_missing_opener_does_not_crash():
    app = ReviewApp(REPO, _rows(1), opener=["no-such-opener"])

    with patch("prview.tui.subprocess.run", side_effect=FileNotFoundError("no-such-opener")):
        result = _drive(app, "enter")

    assert result["row_count"] == 1


def test_escape_blurs_table_and_stops_navigation():
    app = ReviewApp(REPO, _rows(3))
    result = _drive(app, "escape", "down", "down")
    assert result["state"] is FocusState.UNFOCUSED
    assert not result["table_focused"]
    assert result["cursor"] == 0


def test_escape_twice_restores_focus():
    app = ReviewApp(REPO, _rows(3))
    result = _drive(app, "escape", "escape", "down")
    assert result["state"] is FocusState.FOCUSED
    assert result["table_focused"]
    assert result["cursor"] == 1


def test_enter_still_opens_while_unfocused():
    rows = _rows(2)
    app = ReviewApp(REPO, rows)

    with patch("prview.tui.subprocess.run") as run:
        _drive(app, "escape", "enter")

    assert run.call_args.args[0][-1] == rows[0].url


def test_q_quits_cleanly():
    app = ReviewApp(REPO, _rows(1))

    async def run():
        async with app.run_test() as pilot:
            await pilot.press("q")

    asyncio.run(run())
    assert app.return_code == 0


def test_table_uses_configured_widths():
    config = TableConfig(height=5, columns=ColumnWidths(summary=40, author=10, labels=15, date=26))
    app = ReviewApp(REPO, _rows(1), table_config=config)

    async def run():
        async with app.run_test():
            table = app.query_one("#pulls", DataTable)
            return [column.width for column in table.columns.values()]

    assert asyncio.run(run()) == [40, 10, 15, 26]
