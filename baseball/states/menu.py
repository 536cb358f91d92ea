"""
Menu State

Shows the main menu, reads one selection and decides the next state.
"""

from enum import IntEnum
from typing import Optional, Tuple

from .base import GameState, StateKind
from ..config.game_settings import (
    EMPTY_INPUT_MESSAGE,
    INVALID_OPTION_MESSAGE,
    MAX_MENU_OPTION,
    MIN_MENU_OPTION,
    DifficultyMode,
)
from ..exceptions import InvalidOptionError
from ..utils.game_logger import game_logger

MENU_PROMPT = "Select an option: "
DIFFICULTY_PROMPT = "Select a difficulty: "


class MenuOption(IntEnum):
    PLAY = 1
    HISTORY = 2
    RANKING = 3
    LOGOUT = 4


def parse_option(raw: str, minimum: int, maximum: int) -> Tuple[Optional[int], str]:
    """
    Parses a menu line into an option number within [minimum, maximum].

    Returns:
        Tuple of (option, error_message); option is None when the line is rejected
    """
    text = (raw or "").strip()
    if not text:
        return None, EMPTY_INPUT_MESSAGE

    try:
        option = int(text)
    except ValueError:
        return None, INVALID_OPTION_MESSAGE

    if option < minimum or option > maximum:
        return None, INVALID_OPTION_MESSAGE

    return option, ""


class MenuState(GameState):
    """Main menu. Invalid input leaves the session in the menu."""

    kind = StateKind.MENU

    def handle(self, session) -> GameState:
        session.display.show_main_menu()
        option, error = parse_option(session.read_line(MENU_PROMPT), MIN_MENU_OPTION, MAX_MENU_OPTION)
        if option is None:
            session.display.show_error(error)
            return self

        selected = MenuOption(option)
        game_logger.log_user_action(session.user.username, 'menu_select', option=selected.name)
        return self._next_state(selected, session)

    def _next_state(self, option: MenuOption, session) -> GameState:
        from .history import HistoryState
        from .logout import LogoutState
        from .play import PlayState
        from .ranking import RankingState

        if option is MenuOption.PLAY:
            return PlayState(self._select_difficulty(session))
        elif option is MenuOption.HISTORY:
            return HistoryState()
        elif option is MenuOption.RANKING:
            return RankingState()
        elif option is MenuOption.LOGOUT:
            return LogoutState()
        raise ValueError(f"Unhandled menu option: {option!r}")

    def _select_difficulty(self, session) -> DifficultyMode:
        """Re-prompts until a known difficulty option is entered."""
        options = DifficultyMode.options()
        while True:
            session.display.show_difficulty_menu()
            option, error = parse_option(session.read_line(DIFFICULTY_PROMPT), min(options), max(options))
            if option is None:
                session.display.show_error(error)
                continue
            try:
                mode = DifficultyMode.find_by_option(option)
            except InvalidOptionError:
                session.display.show_error(INVALID_OPTION_MESSAGE)
                continue
            game_logger.log_user_action(session.user.username, 'difficulty_select', difficulty=mode.label)
            return mode
