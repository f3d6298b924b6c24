"""
Game Service

Owns the active single-player sessions and exposes the game actions by
game id.
"""

import random
import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROWS, get_message
from ..models.game import GameSession, GameState, GameStatus, GuessOutcome
from . import game_engine
from .word_source import choose_secret_word


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection per language and word length
    - Letter entry, deletion and guess submission
    - Game state views that keep the answer hidden until the game ends
    """

    def __init__(self, max_rows: int = MAX_ROWS, rng: Optional[random.Random] = None):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.max_rows = max_rows
        self.rng = rng or random.Random()
        self._lock = threading.Lock()

    def create_new_game(self, language: str, word_length: int) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            language: Language code of the word list
            word_length: Number of letters in the secret word

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the language or word length is unsupported
        """
        secret_word = choose_secret_word(language, word_length, self.rng)
        return self.start_game(secret_word, language)

    def start_game(self, secret_word: str, language: str) -> str:
        """Registers a session for a known secret word."""
        game_id = str(uuid.uuid4())
        session = game_engine.new_session(secret_word, language, self.max_rows)
        with self._lock:
            self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The answer is only revealed once the game is over.
        """
        session = self.get_session(game_id)
        if session is None:
            return None
        return self._to_state(game_id, session)

    def add_letter(self, game_id: str, letter: str) -> Optional[Tuple[bool, GameState]]:
        """
        Types a letter into the current row.

        Returns:
            Tuple of (accepted, state), or None if the game is not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None

            updated = game_engine.add_letter(session, letter)
            self.games[game_id] = updated
        return updated is not session, self._to_state(game_id, updated)

    def delete_letter(self, game_id: str) -> Optional[Tuple[bool, GameState]]:
        """
        Removes the last letter of the current row.

        Returns:
            Tuple of (accepted, state), or None if the game is not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None

            updated = game_engine.delete_letter(session)
            self.games[game_id] = updated
        return updated is not session, self._to_state(game_id, updated)

    def submit_guess(self, game_id: str) -> Optional[Tuple[Optional[GuessOutcome], GameState]]:
        """
        Submits the current row for evaluation.

        Returns:
            Tuple of (outcome, state); outcome is None when the submission was
            refused. None if the game is not found.
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None

            updated, outcome = game_engine.submit_guess(session)
            self.games[game_id] = updated
        return outcome, self._to_state(game_id, updated)

    def make_guess(self, game_id: str, word: str) -> Optional[Tuple[Optional[GuessOutcome], GameState]]:
        """
        Types a complete word into an empty row and submits it.

        Words that are not exactly one row of letters are refused with no
        change to the session.
        """
        word = (word or "").strip().upper()
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None

            if (session.status != GameStatus.ENTERING or session.current_tile != 0
                    or len(word) != session.word_length or not word.isalpha()):
                return None, self._to_state(game_id, session)

            updated, outcome = game_engine.submit_guess(game_engine.type_word(session, word))
            self.games[game_id] = updated
        return outcome, self._to_state(game_id, updated)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def active_games(self) -> int:
        with self._lock:
            return len(self.games)

    def _to_state(self, game_id: str, session: GameSession) -> GameState:
        message = None
        if session.won:
            message = get_message(session.language, 'won')
        elif session.is_game_over:
            message = get_message(session.language, 'lost', word=session.secret_word)

        return GameState(
            game_id=game_id,
            language=session.language,
            word_length=session.word_length,
            max_rows=session.max_rows,
            current_row=session.current_row,
            current_tile=session.current_tile,
            status=session.status.value,
            board=[list(row) for row in session.board],
            row_results=[[result.value for result in row] for row in session.row_results],
            key_status={letter: result.value for letter, result in session.key_status.items()},
            game_over=session.is_game_over,
            won=session.won,
            message=message,
            answer=session.secret_word if session.is_game_over else None,
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(max_rows: int = MAX_ROWS, rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(max_rows=max_rows, rng=rng)
    return _game_service
