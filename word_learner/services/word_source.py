"""
Word Source

Loads the per-language word lists and picks secret words from them.
"""

import json
import os
import random
from typing import Dict, List, Optional

from ..config.game_settings import (
    SUPPORTED_LANGUAGES, WORD_LENGTHS, WORDS_DIR, is_supported_word_length
)

_word_lists: Dict[str, Dict[int, List[str]]] = {}


def _load_language(language: str) -> Dict[int, List[str]]:
    """
    Load the word lists for one language from words/<language>.json.

    Returns:
        Dict[int, List[str]]: Uppercase words keyed by word length

    Raises:
        FileNotFoundError: If the language file is not found
        ValueError: If the JSON is malformed or not a mapping of lists
    """
    json_file_path = os.path.join(WORDS_DIR, f'{language}.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {language}.json: {e}")

    if not isinstance(raw, dict):
        raise ValueError(f"{language}.json must map word lengths to arrays of words")

    lists: Dict[int, List[str]] = {}
    for length, words in raw.items():
        if not isinstance(words, list):
            raise ValueError(f"Entry '{length}' in {language}.json must be an array of words")
        lists[int(length)] = [word.upper() for word in words]
    return lists


def _lists_for(language: str) -> Dict[int, List[str]]:
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'")
    if language not in _word_lists:
        _word_lists[language] = _load_language(language)
    return _word_lists[language]


def get_word_list(language: str, length: int) -> List[str]:
    """
    Returns the candidate secret words for a language and word length.

    Raises:
        ValueError: If the language or length is unsupported, or no words exist
    """
    if not is_supported_word_length(length):
        raise ValueError(
            f"Word length must be between {WORD_LENGTHS[0]} and {WORD_LENGTHS[-1]}, got {length}"
        )

    words = _lists_for(language).get(length, [])
    if not words:
        raise ValueError(f"No {length}-letter words available for language '{language}'")
    return list(words)


def choose_secret_word(language: str, length: int, rng: Optional[random.Random] = None) -> str:
    """Pick a secret word uniformly at random."""
    rng = rng or random
    return rng.choice(get_word_list(language, length))


def validate_word_list_integrity(language: Optional[str] = None) -> bool:
    """
    Validates the integrity and consistency of the word lists.

    This function checks that, for every list:
    1. Length validation: each word has the length it is filed under
    2. Character validation: only alphabetic characters allowed
    3. Format validation: consistent uppercase formatting
    4. Uniqueness validation: no duplicate entries

    Args:
        language: Language to check, or None for all supported languages

    Returns:
        bool: True if the lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    languages = [language] if language else list(SUPPORTED_LANGUAGES)

    for lang in languages:
        lists = _lists_for(lang)
        if not lists:
            raise ValueError(f"Word list for '{lang}' cannot be empty")

        for length, words in lists.items():
            if not is_supported_word_length(length):
                raise ValueError(f"Unsupported word length {length} in '{lang}' word list")

            for index, word in enumerate(words):
                if len(word) != length:
                    raise ValueError(
                        f"Word at index {index} '{word}' in '{lang}' is not {length} characters long"
                    )
                if not word.isalpha():
                    raise ValueError(
                        f"Word at index {index} '{word}' in '{lang}' contains non-alphabetic characters"
                    )
                if not word.isupper():
                    raise ValueError(
                        f"Word at index {index} '{word}' in '{lang}' is not in uppercase format"
                    )

            if len(words) != len(set(words)):
                duplicates = sorted({word for word in words if words.count(word) > 1})
                raise ValueError(f"Duplicate words found in '{lang}' {length}-letter list: {duplicates}")

    return True


def get_word_statistics(language: str, length: int) -> dict:
    """
    Analyzes one word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    words = get_word_list(language, length)

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
