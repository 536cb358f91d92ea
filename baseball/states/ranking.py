"""
Ranking State

Read-only view of the best attempt counts of every registered user.
"""

from .base import GameState, StateKind
from .menu import MenuState


class RankingState(GameState):
    kind = StateKind.RANKING

    def handle(self, session) -> GameState:
        session.display.show_ranking(session.registry.ranking())
        return MenuState()
