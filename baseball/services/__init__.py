"""
Services Package

Contains the guess engine and the user registry.
"""

from .guess_engine import GuessEngine
from .user_registry import UserRegistry

__all__ = ['GuessEngine', 'UserRegistry']
