"""
Game Engine

Turn-based state machine for one game session. Every action takes a
GameSession and returns one: a new session when the action is accepted, or
the very same object when it is refused. Refusals are silent.
"""

from typing import Optional, Tuple

from ..config.game_settings import MAX_ROWS
from ..models.game import GameSession, GameStatus, GuessOutcome, LetterResult
from .evaluator import evaluate_guess, merge_key_status


def new_session(secret_word: str, language: str, max_rows: int = MAX_ROWS) -> GameSession:
    """Creates a fresh session with an empty board."""
    secret_word = secret_word.upper()
    return GameSession(
        secret_word=secret_word,
        language=language,
        max_rows=max_rows,
        board=[[""] * len(secret_word) for _ in range(max_rows)],
    )


def _copy(session: GameSession) -> GameSession:
    return GameSession(
        secret_word=session.secret_word,
        language=session.language,
        max_rows=session.max_rows,
        board=[list(row) for row in session.board],
        current_row=session.current_row,
        current_tile=session.current_tile,
        row_results=[list(row) for row in session.row_results],
        key_status=dict(session.key_status),
        is_game_over=session.is_game_over,
        won=session.won,
    )


def add_letter(session: GameSession, letter: str) -> GameSession:
    """Places a letter in the next free tile of the current row."""
    if session.status != GameStatus.ENTERING:
        return session
    if not isinstance(letter, str):
        return session

    # Some letters upper-case to two characters (ß -> SS)
    upper = letter.upper()
    if len(upper) != 1 or not upper.isalpha():
        return session

    updated = _copy(session)
    updated.board[updated.current_row][updated.current_tile] = upper
    updated.current_tile += 1
    return updated


def delete_letter(session: GameSession) -> GameSession:
    """Clears the last filled tile of the current row."""
    if session.is_game_over or session.current_tile == 0:
        return session

    updated = _copy(session)
    updated.current_tile -= 1
    updated.board[updated.current_row][updated.current_tile] = ""
    return updated


def type_word(session: GameSession, word: str) -> GameSession:
    """Feeds each letter of a word through add_letter."""
    for letter in word:
        session = add_letter(session, letter)
    return session


def submit_guess(session: GameSession) -> Tuple[GameSession, Optional[GuessOutcome]]:
    """
    Scores the current row and advances the game.

    Returns:
        Tuple of (session, outcome). The outcome is None and the session is
        unchanged when the row is incomplete or the game is already over.
    """
    if session.status != GameStatus.ROW_COMPLETE:
        return session, None

    guess = session.current_guess
    results, key_updates = evaluate_guess(guess, session.secret_word)

    updated = _copy(session)
    updated.row_results.append(results)
    updated.key_status = merge_key_status(updated.key_status, key_updates)

    if all(result == LetterResult.CORRECT for result in results):
        updated.is_game_over = True
        updated.won = True
    elif updated.current_row == updated.max_rows - 1:
        updated.is_game_over = True
    else:
        updated.current_row += 1
        updated.current_tile = 0

    return updated, GuessOutcome(guess=guess, results=results, key_updates=key_updates)
