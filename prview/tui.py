"""
Textual TUI for browsing pull requests.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header

from .config import TableConfig, default_opener
from .remote import OwnerRepo
from .rows import COLUMN_TITLES, DisplayRow
from .session import Action, FocusState, Key, step

logger = logging.getLogger(__name__)


class ReviewApp(App):
    TITLE = "prview"
    BINDINGS = [
        Binding("escape", "toggle_focus", "Focus", priority=True),
        Binding("enter", "open_pull", "Open", priority=True),
        Binding("q", "quit_session", "Quit"),
        Binding("ctrl+c", "quit_session", "Quit", priority=True, show=False),
    ]

    CSS = """
    #pulls {
      border: solid #585858;
    }
    #pulls > .datatable--header {
      text-style: none;
    }
    #pulls > .datatable--cursor {
      color: #ffffaf;
      background: #5f00ff;
      text-style: none;
    }
    """

    def __init__(
        self,
        repo: OwnerRepo,
        rows: Sequence[DisplayRow],
        table_config: TableConfig | None = None,
        opener: Sequence[str] | None = None,
    ):
        super().__init__()
        self.repo = repo
        self.rows = list(rows)
        self.table_config = table_config or TableConfig()
        self.opener = list(opener) if opener else default_opener()
        self.focus_state = FocusState.FOCUSED

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="pulls", cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.repo.full_name
        table = self.query_one("#pulls", DataTable)
        widths = self.table_config.columns
        for title, width in zip(
            COLUMN_TITLES, (widths.summary, widths.author, widths.labels, widths.date)
        ):
            table.add_column(title, width=width, key=title.lower())
        for index, row in enumerate(self.rows):
            table.add_row(*row.cells, key=str(index))
        # visible rows + header + top and bottom border
        table.styles.height = self.table_config.height + 3
        table.focus()

    @property
    def cursor(self) -> int:
        return self.query_one("#pulls", DataTable).cursor_row

    def dispatch_key(self, key: Key) -> None:
        """Run a key through the state machine and apply the result."""
        transition = step(self.focus_state, key, self.rows, self.cursor)
        self._apply_focus(transition.state)

        if transition.action is Action.QUIT:
            self.exit()
        elif transition.action is Action.OPEN and transition.url:
            self.open_url(transition.url)

    def _apply_focus(self, state: FocusState) -> None:
        if state is self.focus_state:
            return
        self.focus_state = state
        table = self.query_one("#pulls", DataTable)
        if state is FocusState.FOCUSED:
            table.can_focus = True
            self.set_focus(table)
        else:
            # tab must not bring the table back either
            table.can_focus = False
            self.set_focus(None)

    def open_url(self, url: str) -> None:
        """Hand the terminal to the opener until it exits, then redraw."""
        command = [*self.opener, url]
        try:
            with self.suspend():
                error = self._run_opener(command)
        except SuspendNotSupported:
            error = self._run_opener(command)
        if error:
            self.notify(error, severity="error")
        self.refresh()

    def _run_opener(self, command: list[str]) -> str | None:
        logger.debug("Running %s", command)
        try:
            subprocess.run(command, check=False)
        except OSError as exc:
            logger.warning("Could not run %s: %s", command[0], exc)
            return f"Could not run {command[0]}: {exc}"
        return None

    def action_toggle_focus(self) -> None:
        self.dispatch_key(Key.ESCAPE)

    def action_open_pull(self) -> None:
        self.dispatch_key(Key.ENTER)

    def action_quit_session(self) -> None:
        self.dispatch_key(Key.QUIT)
