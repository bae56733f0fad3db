"""
Game Engine

Contains the single-player Wordle state machine: key-press transitions,
outcome evaluation, per-cell feedback colors, keyboard letter status and
the shareable emoji score.

The module-level functions are pure and work on immutable ``GameState``
values. ``WordleEngine`` holds the current state for one game and talks to
the notifier and clipboard collaborators.
"""

import logging
from dataclasses import replace
from typing import FrozenSet, List, Optional, Tuple

from ..config.game_settings import CLEAR, COLORS_TO_EMOJI, EMPTY_CELL, ENTER, SHARE_TITLE
from ..models.game import GameConfig, GameState, KeyboardStatus, LetterStatus, Outcome, TransitionResult
from .notifications import (
    Clipboard, Notification, Notifier, copied_notification, lost_notification, won_notification,
)

logger = logging.getLogger(__name__)

_ENTER_ALIASES = {ENTER, "\n", "\r", "RETURN"}
_CLEAR_ALIASES = {CLEAR, "\b", "BACKSPACE"}


class InvalidKeyError(ValueError):
    """Raised for key payloads that are neither a letter nor a sentinel."""


class GameNotWonError(RuntimeError):
    """Raised when a score is shared before the game has been won."""


def normalize_key(key) -> str:
    """
    Maps a raw key payload to ENTER, CLEAR or a lower-case ASCII letter.

    Raises:
        InvalidKeyError: For anything else
    """
    if not isinstance(key, str) or not key:
        raise InvalidKeyError("Key must be a non-empty string")

    if key.upper() in _ENTER_ALIASES:
        return ENTER
    if key.upper() in _CLEAR_ALIASES:
        return CLEAR
    if len(key) == 1 and key.isascii() and key.isalpha():
        return key.lower()

    raise InvalidKeyError(f"Unsupported key: {key!r}")


def is_row_correct(state: GameState, config: GameConfig, row: int) -> bool:
    return all(letter == target for letter, target in zip(state.grid[row], config.letters))


def evaluate_outcome(state: GameState, config: GameConfig) -> Tuple[GameState, TransitionResult]:
    """
    Classifies the most recently submitted row.

    Won is checked before lost, so a correct final attempt always wins.
    """
    if state.row == 0:
        return state, TransitionResult.CONTINUED

    won = is_row_correct(state, config, state.row - 1)
    if won and state.outcome is not Outcome.WON:
        return replace(state, outcome=Outcome.WON), TransitionResult.WON
    if not won and state.row >= config.max_attempts and state.outcome is not Outcome.LOST:
        return replace(state, outcome=Outcome.LOST), TransitionResult.LOST

    return state, TransitionResult.CONTINUED


def apply_key(state: GameState, key: str, config: GameConfig) -> Tuple[GameState, TransitionResult]:
    """
    Applies one key press and returns the next state.

    Presses that cannot act (anything once the game is over, CLEAR on an
    empty row, ENTER on an incomplete row, a letter on a full row) return
    the same state object unchanged.
    """
    key = normalize_key(key)

    if state.outcome is not Outcome.PLAYING:
        return state, TransitionResult.CONTINUED

    if key == CLEAR:
        if state.col == 0:
            return state, TransitionResult.CONTINUED
        col = state.col - 1
        return replace(state, grid=state.with_cell(state.row, col, EMPTY_CELL), col=col), TransitionResult.CONTINUED

    if key == ENTER:
        if state.col != config.word_length:
            return state, TransitionResult.CONTINUED
        # No dictionary check: any full row counts as a guess
        return evaluate_outcome(replace(state, row=state.row + 1, col=0), config)

    if state.col >= config.word_length:
        return state, TransitionResult.CONTINUED
    return replace(state, grid=state.with_cell(state.row, state.col, key), col=state.col + 1), TransitionResult.CONTINUED


def color_of(state: GameState, config: GameConfig, row: int, col: int) -> LetterStatus:
    """
    Feedback color of one cell.

    Single pass against the raw puzzle word: a repeated guess letter is
    PRESENT for every copy even when the puzzle holds it once.
    """
    if row >= state.row:
        return LetterStatus.UNSET

    letter = state.grid[row][col]
    if letter == config.word[col]:
        return LetterStatus.CORRECT
    if letter != EMPTY_CELL and letter in config.word:
        return LetterStatus.PRESENT
    return LetterStatus.ABSENT


def row_colors(state: GameState, config: GameConfig, row: int) -> List[LetterStatus]:
    return [color_of(state, config, row, col) for col in range(config.word_length)]


def letters_with_status(state: GameState, config: GameConfig, status: LetterStatus) -> FrozenSet[str]:
    """Set of letters, across the whole grid, whose cell color is ``status``."""
    return frozenset(
        state.grid[row][col]
        for row in range(len(state.grid))
        for col in range(config.word_length)
        if state.grid[row][col] != EMPTY_CELL and color_of(state, config, row, col) is status
    )


def keyboard_status(state: GameState, config: GameConfig) -> KeyboardStatus:
    return KeyboardStatus(
        correct=letters_with_status(state, config, LetterStatus.CORRECT),
        present=letters_with_status(state, config, LetterStatus.PRESENT),
        absent=letters_with_status(state, config, LetterStatus.ABSENT),
    )


def is_cell_active(state: GameState, row: int, col: int) -> bool:
    """True for the cell the next letter will be written into."""
    return state.outcome is Outcome.PLAYING and row == state.row and col == state.col


def share_text(state: GameState, config: GameConfig) -> str:
    """
    Emoji grid of the submitted rows under a title line.

    Unset cells render as nothing, so rows not yet played drop out.
    """
    lines = []
    for row in range(len(state.grid)):
        line = "".join(COLORS_TO_EMOJI[color.value] for color in row_colors(state, config, row))
        if line:
            lines.append(line)
    return SHARE_TITLE + "\n" + "\n".join(lines)


def _discard(_value) -> None:
    pass


class WordleEngine:
    """
    One game of the daily puzzle.

    This class handles:
    - Holding the current immutable game state
    - Feeding key presses through the transition function
    - Firing won/lost notifications exactly once, on the transition
    - Writing the share text to the clipboard collaborator
    """

    def __init__(self, config: GameConfig,
                 notifier: Optional[Notifier] = None,
                 clipboard: Optional[Clipboard] = None):
        self.config = config
        self.state = GameState.empty(config)
        self._notify: Notifier = notifier or _discard
        self._clipboard: Clipboard = clipboard or _discard

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    def press(self, key: str) -> TransitionResult:
        """
        Processes a key press from the input surface.

        Returns:
            TransitionResult: WON or LOST on the press that ended the game,
                CONTINUED otherwise

        Raises:
            InvalidKeyError: If the key is neither a letter nor a sentinel
        """
        self.state, result = apply_key(self.state, key, self.config)

        if result is TransitionResult.WON:
            logger.debug("Puzzle solved in %d rows", self.state.row)
            self._emit(won_notification())
        elif result is TransitionResult.LOST:
            logger.debug("Out of attempts after %d rows", self.state.row)
            self._emit(lost_notification(self.config.word))

        return result

    def color_of(self, row: int, col: int) -> LetterStatus:
        return color_of(self.state, self.config, row, col)

    def row_colors(self, row: int) -> List[LetterStatus]:
        return row_colors(self.state, self.config, row)

    def keyboard_status(self) -> KeyboardStatus:
        return keyboard_status(self.state, self.config)

    def is_cell_active(self, row: int, col: int) -> bool:
        return is_cell_active(self.state, row, col)

    def share_text(self) -> str:
        return share_text(self.state, self.config)

    def share_score(self) -> str:
        """
        Copies the emoji score to the clipboard and tells the player.

        Raises:
            GameNotWonError: If the game has not been won
        """
        if self.state.outcome is not Outcome.WON:
            raise GameNotWonError("Only a won game can be shared")

        text = self.share_text()
        self._clipboard(text)
        self._emit(copied_notification())
        return text

    def _emit(self, notification: Notification) -> None:
        self._notify(notification)
