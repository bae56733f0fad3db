"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import EMPTY_CELL, NUMBER_OF_TRIES


class LetterStatus(Enum):
    """Feedback color of a single grid cell."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNSET = "UNSET"


class Outcome(Enum):
    """Game status. Once WON or LOST the game no longer changes."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class TransitionResult(Enum):
    """What a single key press did to the outcome."""
    CONTINUED = "continued"
    WON = "won"
    LOST = "lost"


Row = Tuple[str, ...]
Grid = Tuple[Row, ...]


@dataclass(frozen=True)
class GameConfig:
    """Puzzle word and board size injected into an engine."""
    word: str
    max_attempts: int = NUMBER_OF_TRIES

    def __post_init__(self):
        if not isinstance(self.word, str) or not self.word:
            raise ValueError("Puzzle word must be a non-empty string")
        if not (self.word.isascii() and self.word.isalpha()):
            raise ValueError(f"Puzzle word '{self.word}' must contain only ASCII letters")
        if not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise ValueError("max_attempts must be a positive integer")
        # frozen dataclass: bypass __setattr__ to store the normalized word
        object.__setattr__(self, 'word', self.word.lower())

    @property
    def word_length(self) -> int:
        return len(self.word)

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(self.word)


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game in progress.

    ``row`` is the row the next letter goes into and ``col`` the column.
    ``col == word_length`` means the row is full and awaiting ENTER;
    ``row == max_attempts`` only happens after the last submission.
    """
    grid: Grid
    row: int = 0
    col: int = 0
    outcome: Outcome = Outcome.PLAYING

    @classmethod
    def empty(cls, config: GameConfig) -> "GameState":
        empty_row = tuple(EMPTY_CELL for _ in range(config.word_length))
        return cls(grid=tuple(empty_row for _ in range(config.max_attempts)))

    def with_cell(self, row: int, col: int, letter: str) -> Grid:
        """Return a new grid with one cell replaced."""
        new_row = self.grid[row][:col] + (letter,) + self.grid[row][col + 1:]
        return self.grid[:row] + (new_row,) + self.grid[row + 1:]


@dataclass(frozen=True)
class KeyboardStatus:
    """Letters per feedback color, used to recolor keyboard keys."""
    correct: frozenset = frozenset()
    present: frozenset = frozenset()
    absent: frozenset = frozenset()

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "correct": sorted(self.correct),
            "present": sorted(self.present),
            "absent": sorted(self.absent),
        }


@dataclass
class GameSnapshot:
    """Client-facing game state representation."""
    game_id: str
    grid: List[List[str]]
    colors: List[List[str]]  # LetterStatus values for JSON serialization
    current_row: int
    current_col: int
    max_attempts: int
    word_length: int
    outcome: str
    keyboard: Dict[str, List[str]] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over
