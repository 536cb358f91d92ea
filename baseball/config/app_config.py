"""
Configuration Management Module

Centralized configuration for the number baseball console game.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env (already-set variables win)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    DEBUG = _env_flag('DEBUG', 'False')
    TESTING = False

    # Difficulty Settings (secret digit length per mode)
    EASY_DIGITS = int(os.getenv('EASY_DIGITS', 3))
    NORMAL_DIGITS = int(os.getenv('NORMAL_DIGITS', 4))
    HARD_DIGITS = int(os.getenv('HARD_DIGITS', 5))

    # Login Settings
    MAX_USERNAME_LENGTH = int(os.getenv('MAX_USERNAME_LENGTH', 20))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'True')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(env_name: str = None):
    """Return the configuration class selected by name or BASEBALL_ENV."""
    name = env_name or os.getenv('BASEBALL_ENV', 'default')
    return config.get(name.lower(), config['default'])
