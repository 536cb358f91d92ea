"""
History State

Read-only view of the current user's game records.
"""

from .base import GameState, StateKind
from .menu import MenuState


class HistoryState(GameState):
    kind = StateKind.HISTORY

    def handle(self, session) -> GameState:
        session.display.show_history(session.user)
        return MenuState()
