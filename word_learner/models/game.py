"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class LetterResult(Enum):
    """Evaluation outcome for one letter position in a submitted guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def strength(self) -> int:
        return _STRENGTH[self]


_STRENGTH = {
    LetterResult.ABSENT: 0,
    LetterResult.PRESENT: 1,
    LetterResult.CORRECT: 2,
}


class GameStatus(Enum):
    """
    Turn state of a game session.

    EVALUATING is only announced to the presentation layer while a submitted
    row is revealed; a stored session is never in that state.
    """
    ENTERING = "ENTERING"
    ROW_COMPLETE = "ROW_COMPLETE"
    EVALUATING = "EVALUATING"
    WON = "WON"
    LOST = "LOST"


@dataclass
class GameSession:
    """Complete state of one single-player game."""
    secret_word: str
    language: str
    max_rows: int
    board: List[List[str]]
    current_row: int = 0
    current_tile: int = 0
    row_results: List[List[LetterResult]] = field(default_factory=list)
    key_status: Dict[str, LetterResult] = field(default_factory=dict)
    is_game_over: bool = False
    won: bool = False

    @property
    def word_length(self) -> int:
        return len(self.secret_word)

    @property
    def current_guess(self) -> str:
        return "".join(self.board[self.current_row])

    @property
    def status(self) -> GameStatus:
        if self.is_game_over:
            return GameStatus.WON if self.won else GameStatus.LOST
        if self.current_tile == self.word_length:
            return GameStatus.ROW_COMPLETE
        return GameStatus.ENTERING


@dataclass
class GuessOutcome:
    """Result of evaluating one submitted row."""
    guess: str
    results: List[LetterResult]
    key_updates: Dict[str, LetterResult]

    def to_dict(self) -> Dict:
        return {
            "guess": self.guess,
            "results": [result.value for result in self.results],
            "key_updates": {letter: result.value for letter, result in self.key_updates.items()},
        }


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    language: str
    word_length: int
    max_rows: int
    current_row: int
    current_tile: int
    status: str
    board: List[List[str]]
    row_results: List[List[str]]  # Result labels as strings for JSON serialization
    key_status: Dict[str, str]
    game_over: bool
    won: bool
    message: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
