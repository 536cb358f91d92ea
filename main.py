"""
Number Baseball - Main Entry Point

Prompts for a username, runs a game session for that user, and returns to
the login prompt after logout. A blank name or 'q' quits.
"""

import sys

from rich.console import Console

from baseball.config import get_config, validate_difficulty_integrity
from baseball.services.user_registry import UserRegistry
from baseball.session import GameSession
from baseball.utils.console import ConsoleInput, GameConsole
from baseball.utils.game_logger import game_logger

LOGIN_PROMPT = "Username (blank or 'q' to quit): "
QUIT_COMMANDS = {"", "q", "quit"}


def login_loop(registry: UserRegistry, input_source: ConsoleInput, display: GameConsole) -> None:
    """Keep logging users in until the quit command is entered."""
    while True:
        username = input_source.read_line(LOGIN_PROMPT).strip()
        if username.lower() in QUIT_COMMANDS:
            return

        result = registry.login(username)
        if not result["success"]:
            display.show_error(result["error"])
            continue

        user = result["user"]
        game_logger.log_user_action(user.username, 'login', created=result["created"])
        display.show_welcome(user, result["created"])

        GameSession(user, registry, input_source, display).run()


def main():
    """Main function to validate settings and start the login loop."""
    app_config = get_config()
    console = Console()

    try:
        validate_difficulty_integrity()
    except ValueError as config_error:
        # Broken modes fail at game start and fall back to the menu
        game_logger.logger.warning(f"Difficulty configuration problem: {config_error}")

    game_logger.logger.info(f"Number Baseball starting (debug={app_config.DEBUG})")

    try:
        login_loop(UserRegistry(app_config.MAX_USERNAME_LENGTH), ConsoleInput(console), GameConsole(console))
    except (KeyboardInterrupt, EOFError):
        console.print("\n[dim]Bye.[/]")
        game_logger.logger.info("Number Baseball shutting down (input closed)")
        return 0
    except Exception as e:
        game_logger.logger.error(f"Unexpected error: {e}")
        raise

    game_logger.logger.info("Number Baseball shutting down")
    return 0


if __name__ == '__main__':
    sys.exit(main())
