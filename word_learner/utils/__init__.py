"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import with_game_service, websocket_game_service
from .helpers import get_user_identity, parse_word_length
from .game_logger import game_logger

__all__ = ['with_game_service', 'websocket_game_service', 'get_user_identity', 'parse_word_length',
           'game_logger']
