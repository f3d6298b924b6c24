"""
Guess Evaluator

Scores a guess against the secret word and aggregates keyboard status.
"""

from typing import Dict, List, Optional, Tuple

from ..models.game import LetterResult


def evaluate_guess(guess: str, secret: str) -> Tuple[List[LetterResult], Dict[str, LetterResult]]:
    """
    Implements the two-pass Wordle letter evaluation algorithm.

    Each secret letter can back at most one CORRECT or PRESENT result, so a
    letter guessed twice against a single occurrence scores only once.

    Args:
        guess: Submitted word
        secret: Secret word of the same length

    Returns:
        Tuple of (per-position results, letter -> best result in this guess)

    Raises:
        ValueError: If guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess '{guess}' must have {len(secret)} letters")

    results: List[Optional[LetterResult]] = [None] * len(guess)
    key_updates: Dict[str, LetterResult] = {}

    # Working copy to track letter consumption
    remaining: List[Optional[str]] = list(secret)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == remaining[i]:
            results[i] = LetterResult.CORRECT
            key_updates[letter] = LetterResult.CORRECT
            remaining[i] = None

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if results[i] is not None:
            continue

        if letter in remaining:
            results[i] = LetterResult.PRESENT
            if key_updates.get(letter) != LetterResult.CORRECT:
                key_updates[letter] = LetterResult.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            results[i] = LetterResult.ABSENT
            if letter not in key_updates:
                key_updates[letter] = LetterResult.ABSENT

    return results, key_updates  # type: ignore[return-value]


def merge_key_status(current: Dict[str, LetterResult],
                     updates: Dict[str, LetterResult]) -> Dict[str, LetterResult]:
    """
    Combines keyboard status with the updates from a new guess.

    Status can only progress in strength order (ABSENT < PRESENT < CORRECT).
    """
    merged = dict(current)
    for letter, new_status in updates.items():
        existing = merged.get(letter)
        if existing is None or new_status.strength > existing.strength:
            merged[letter] = new_status
    return merged
