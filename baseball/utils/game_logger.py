"""
Game Logger Module for Number Baseball

This module provides structured logging for user actions, game events
and errors. Every entry is a single JSON document per line.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the number baseball game.

    Features:
    - User action tracking by username
    - Game event logging (start, guesses, wins, aborts)
    - JSON structured logs for easy parsing
    """

    def __init__(self,
                 log_dir: str = Config.LOG_DIR,
                 level: str = Config.LOG_LEVEL,
                 log_to_file: bool = Config.LOG_TO_FILE):
        self.log_dir = Path(log_dir)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.log_to_file = log_to_file

        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('baseball_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        if self.log_to_file:
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console only gets warnings and errors so it does not clutter the game screen
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          username: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': {'username': username},
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, username: Optional[str], action: str, **kwargs):
        """
        Log user actions.

        Args:
            username: Logged-in user, None before login
            action: Type of action (e.g., 'login', 'menu_select', 'logout')
            **kwargs: Additional details to log
        """
        log_message = self._create_log_entry('USER_ACTION', action, username, dict(kwargs))
        self.logger.info(log_message)

    def log_game_event(self,
                       username: Optional[str],
                       event: str,
                       game_number: Optional[int] = None,
                       **kwargs):
        """
        Log game-specific events.

        Args:
            username: Player of the game
            event: Type of game event (e.g., 'game_started', 'guess_scored', 'game_won')
            game_number: Number of the game in the player's history
            **kwargs: Additional game details
        """
        details = {'game_number': game_number, **kwargs}
        log_message = self._create_log_entry('GAME_EVENT', event, username, details)
        self.logger.info(log_message)

    def log_error(self,
                  username: Optional[str],
                  error: Exception,
                  action: str,
                  **kwargs):
        """
        Log errors with full context.

        Args:
            username: Logged-in user, if any
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        log_message = self._create_log_entry('ERROR', action, username, details)
        self.logger.error(log_message)


# Global logger instance
game_logger = GameLogger()
