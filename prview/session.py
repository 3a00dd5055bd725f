"""
Key handling for the review table as a small state machine.

The table is either focused or unfocused. Only the keys the app binds
(escape, q/ctrl+c, enter) pass through step(); navigation keys reach the
table through widget focus, so they stop while it is unfocused. step()
maps a state and a key to the next state and the action the UI should
perform; it has no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .rows import DisplayRow


OPENABLE_SCHEMES = ("http://", "https://")


class FocusState(Enum):
    FOCUSED = "focused"
    UNFOCUSED = "unfocused"

    def toggled(self) -> "FocusState":
        if self is FocusState.FOCUSED:
            return FocusState.UNFOCUSED
        return FocusState.FOCUSED


class Key(Enum):
    ESCAPE = "escape"
    QUIT = "quit"
    ENTER = "enter"


class Action(Enum):
    NONE = "none"
    QUIT = "quit"
    OPEN = "open"


@dataclass(frozen=True)
class Transition:
    state: FocusState
    action: Action
    url: str | None = None


def is_openable(url: str | None) -> bool:
    return bool(url) and url.startswith(OPENABLE_SCHEMES)


def step(
    state: FocusState,
    key: Key,
    rows: Sequence[DisplayRow] = (),
    cursor: int = 0,
) -> Transition:
    """Compute the transition for a key press."""
    if key is Key.ESCAPE:
        return Transition(state.toggled(), Action.NONE)

    if key is Key.QUIT:
        return Transition(state, Action.QUIT)

    if 0 <= cursor < len(rows) and is_openable(rows[cursor].url):
        return Transition(state, Action.OPEN, rows[cursor].url)
    return Transition(state, Action.NONE)
