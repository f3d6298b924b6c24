"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSession, GameState, GameStatus, GuessOutcome, LetterResult

__all__ = ['GameSession', 'GameState', 'GameStatus', 'GuessOutcome', 'LetterResult']
