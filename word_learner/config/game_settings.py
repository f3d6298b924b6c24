"""
Game Configuration Constants Module

Game rules, supported languages, reveal timings, interface strings and
keyboard layouts. Word lists themselves live in words/<language>.json.
"""

import os
from typing import Dict, Final, List

# Core Game Configuration Constants
MAX_ROWS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 8
WORD_LENGTHS: Final[List[int]] = list(range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1))

SUPPORTED_LANGUAGES: Final[Dict[str, str]] = {
    'en': 'English',
    'es': 'Español',
    'fr': 'Français',
}

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')

# Tile reveal timings in milliseconds
FLIP_STAGGER_MS: Final[int] = 200
"""Delay between the start of consecutive tile flips."""

FLIP_HALF_MS: Final[int] = 300
"""Point in a flip where the tile color is applied (half of the animation)."""

FLIP_DURATION_MS: Final[int] = 600
"""Full flip animation; the row is settled this long after the last flip starts."""

# Static shell assets precached for offline play
PRECACHE_ASSETS: Final[List[str]] = [
    '/',
    '/index.html',
    '/style.css',
    '/script.js',
    '/manifest.json',
] + [f'/words/{language}.json' for language in SUPPORTED_LANGUAGES]

MESSAGES: Final[Dict[str, Dict[str, str]]] = {
    'en': {
        'won': 'Congratulations! You guessed the word.',
        'lost': 'Game over! The word was {word}.',
        'new_game': 'New game',
        'enter': 'Enter',
        'delete': 'Delete',
    },
    'es': {
        'won': '¡Felicidades! Adivinaste la palabra.',
        'lost': '¡Fin del juego! La palabra era {word}.',
        'new_game': 'Nuevo juego',
        'enter': 'Enviar',
        'delete': 'Borrar',
    },
    'fr': {
        'won': 'Bravo ! Vous avez trouvé le mot.',
        'lost': 'Partie terminée ! Le mot était {word}.',
        'new_game': 'Nouvelle partie',
        'enter': 'Entrée',
        'delete': 'Effacer',
    },
}

KEYBOARD_LAYOUTS: Final[Dict[str, List[str]]] = {
    'en': ['QWERTYUIOP', 'ASDFGHJKL', 'ZXCVBNM'],
    'es': ['QWERTYUIOP', 'ASDFGHJKLÑ', 'ZXCVBNM'],
    'fr': ['AZERTYUIOP', 'QSDFGHJKLM', 'WXCVBN'],
}


def get_message(language: str, key: str, **kwargs) -> str:
    """
    Returns an interface string in the requested language.

    Unknown languages fall back to English.
    """
    messages = MESSAGES.get(language, MESSAGES['en'])
    template = messages.get(key) or MESSAGES['en'][key]
    return template.format(**kwargs)


def is_supported_word_length(length: int) -> bool:
    return MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH
