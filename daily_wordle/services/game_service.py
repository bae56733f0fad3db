"""
Game Service

Keeps the in-memory game sessions and routes key presses to their engines.
"""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..models.game import GameConfig, GameSnapshot, Outcome, TransitionResult
from .game_engine import WordleEngine, keyboard_status, row_colors
from .notifications import Notification
from .word_selection import daily_config


class GameNotFoundError(KeyError):
    """Raised when a game id does not match any active session."""


@dataclass
class SessionOutbox:
    """Notifications and clipboard writes waiting to be delivered to the client."""
    notifications: List[Notification] = field(default_factory=list)
    clipboard: List[str] = field(default_factory=list)

    def drain(self) -> Dict[str, List]:
        drained = {
            "notifications": [notification.to_dict() for notification in self.notifications],
            "clipboard": list(self.clipboard),
        }
        self.notifications.clear()
        self.clipboard.clear()
        return drained


@dataclass
class GameSession:
    game_id: str
    engine: WordleEngine
    outbox: SessionOutbox


@dataclass
class KeyPressOutcome:
    """What the surface sends back after a key press."""
    result: TransitionResult
    state: GameSnapshot
    notifications: List[Dict] = field(default_factory=list)
    clipboard: List[str] = field(default_factory=list)


@dataclass
class ShareOutcome:
    share_text: str
    notifications: List[Dict] = field(default_factory=list)
    clipboard: List[str] = field(default_factory=list)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Daily word selection
    - Key press routing to the per-game engine
    - Game state snapshots without exposing the answer before the game ends
    """

    def __init__(self):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self._lock = threading.Lock()

    def create_new_game(self, word: Optional[str] = None, now: Optional[datetime] = None) -> str:
        """
        Creates a new game session.

        Args:
            word: Puzzle word to use instead of the daily one
            now: Moment used to pick the daily word (defaults to the current time)

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If ``word`` is not a valid puzzle word
        """
        config = GameConfig(word=word) if word is not None else daily_config(now)

        outbox = SessionOutbox()
        engine = WordleEngine(config, notifier=outbox.notifications.append, clipboard=outbox.clipboard.append)

        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = GameSession(game_id=game_id, engine=engine, outbox=outbox)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot object or None if game not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            return self._build_snapshot(session)

    def press_key(self, game_id: str, key: str) -> KeyPressOutcome:
        """
        Feeds one key press to a game.

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidKeyError: If the key is neither a letter nor ENTER/CLEAR
        """
        with self._lock:
            session = self._get_session(game_id)
            result = session.engine.press(key)
            drained = session.outbox.drain()
            snapshot = self._build_snapshot(session)

        return KeyPressOutcome(result=result, state=snapshot, **drained)

    def share_score(self, game_id: str) -> ShareOutcome:
        """
        Produces the emoji score of a won game and queues it for the clipboard.

        Raises:
            GameNotFoundError: If the game does not exist
            GameNotWonError: If the game has not been won
        """
        with self._lock:
            session = self._get_session(game_id)
            text = session.engine.share_score()
            drained = session.outbox.drain()

        return ShareOutcome(share_text=text, **drained)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def _get_session(self, game_id: str) -> GameSession:
        session = self.games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def _build_snapshot(self, session: GameSession) -> GameSnapshot:
        # One state value for every derived field; callers hold the lock
        state = session.engine.state
        config = session.engine.config

        return GameSnapshot(
            game_id=session.game_id,
            grid=[[letter.upper() for letter in row] for row in state.grid],
            colors=[[color.value for color in row_colors(state, config, row)] for row in range(len(state.grid))],
            current_row=state.row,
            current_col=state.col,
            max_attempts=config.max_attempts,
            word_length=config.word_length,
            outcome=state.outcome.value,
            keyboard=keyboard_status(state, config).to_dict(),
            answer=config.word if state.outcome is not Outcome.PLAYING else None,
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service() -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService()
    return _game_service
