"""
Utilities Package

Contains logging and console input/output helpers.
"""

from .console import ConsoleInput, GameConsole
from .game_logger import GameLogger, game_logger

__all__ = ['ConsoleInput', 'GameConsole', 'GameLogger', 'game_logger']
