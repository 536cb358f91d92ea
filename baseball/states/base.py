"""
Game State Base

Every phase of interaction is a GameState value object. `handle` runs one
self-contained unit of interaction against the session and returns the
state that should become current next.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..session import GameSession


class StateKind(Enum):
    """Tag identifying which phase a state object represents."""
    MENU = "MENU"
    PLAY = "PLAY"
    HISTORY = "HISTORY"
    RANKING = "RANKING"
    LOGOUT = "LOGOUT"


class GameState:
    """Base class for all game states."""

    kind: StateKind

    def handle(self, session: "GameSession") -> "GameState":
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
