"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, languages and interface strings
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ROWS, MIN_WORD_LENGTH, MAX_WORD_LENGTH, WORD_LENGTHS, SUPPORTED_LANGUAGES,
    PRECACHE_ASSETS, KEYBOARD_LAYOUTS, get_message
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ROWS', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH', 'WORD_LENGTHS', 'SUPPORTED_LANGUAGES',
    'PRECACHE_ASSETS', 'KEYBOARD_LAYOUTS', 'get_message'
]
