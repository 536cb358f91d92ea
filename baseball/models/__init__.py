"""
Data Models Package

Contains all data models used throughout the game.
"""

from .game import GameRecord, GuessResult
from .user import RankingEntry, User, UserStats

__all__ = ['GameRecord', 'GuessResult', 'RankingEntry', 'User', 'UserStats']
