"""
Game States Package

One module per phase of interaction: menu, play, history, ranking, logout.
"""

from .base import GameState, StateKind
from .history import HistoryState
from .logout import LogoutState
from .menu import MenuOption, MenuState, parse_option
from .play import PlayState
from .ranking import RankingState

__all__ = [
    'GameState', 'StateKind', 'HistoryState', 'LogoutState', 'MenuOption',
    'MenuState', 'parse_option', 'PlayState', 'RankingState'
]
