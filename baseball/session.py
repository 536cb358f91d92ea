"""
Game Session

Holds the logged-in user and the current state, and runs the
handle-and-transition loop until the user logs out.
"""

from typing import Callable, Optional

from .services.guess_engine import GuessEngine
from .services.user_registry import UserRegistry
from .models.user import User
from .states.base import GameState
from .states.menu import MenuState
from .utils.console import ConsoleInput, GameConsole


class GameSession:
    """
    Session context threaded through every state handler.

    Args:
        user: The logged-in user
        registry: All known users, read by the ranking view
        input_source: Object with `read_line(prompt) -> str`
        display: GameConsole (or compatible) receiving outcome data
        engine_factory: Builds a GuessEngine for a given secret length
        initial_state: State to start in, the main menu by default
    """

    def __init__(self,
                 user: User,
                 registry: UserRegistry,
                 input_source: Optional[ConsoleInput] = None,
                 display: Optional[GameConsole] = None,
                 engine_factory: Callable[[int], GuessEngine] = GuessEngine,
                 initial_state: Optional[GameState] = None):
        self.user = user
        self.registry = registry
        self.input_source = input_source or ConsoleInput()
        self.display = display or GameConsole()
        self.engine_factory = engine_factory
        self.state: GameState = initial_state or MenuState()
        self.ended = False

    def read_line(self, prompt: str = "") -> str:
        return self.input_source.read_line(prompt)

    def step(self) -> GameState:
        """Run one unit of interaction and commit the returned state."""
        self.state = self.state.handle(self)
        return self.state

    def run(self) -> None:
        while not self.ended:
            self.step()
