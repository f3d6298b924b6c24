"""
Services Package

Contains all business logic and service classes.
"""

from .asset_cache import AssetCache, get_asset_cache, initialize_asset_cache
from .evaluator import evaluate_guess, merge_key_status
from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import choose_secret_word, get_word_list

__all__ = [
    'AssetCache', 'get_asset_cache', 'initialize_asset_cache',
    'evaluate_guess', 'merge_key_status',
    'GameService', 'get_game_service', 'initialize_game_service',
    'choose_secret_word', 'get_word_list'
]
