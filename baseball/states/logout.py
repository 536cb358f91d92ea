"""
Logout State

Terminal state: ends the current user's session.
"""

from .base import GameState, StateKind
from ..utils.game_logger import game_logger


class LogoutState(GameState):
    kind = StateKind.LOGOUT

    def handle(self, session) -> GameState:
        game_logger.log_user_action(
            session.user.username, 'logout',
            games_played=len(session.user.history)
        )
        session.display.show_goodbye(session.user)
        session.ended = True
        return self
