"""
Word Selection

Picks the puzzle word for a calendar day from the static word list.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from ..config.game_settings import NUMBER_OF_TRIES, WORD_LIST
from ..models.game import GameConfig

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def day_of_year(now: Optional[datetime] = None) -> int:
    """
    Returns the 1-based ordinal day of ``now`` within its year.

    Counted from midnight of "January 0" (the last day of the previous year),
    so January 1st is day 1. Naive datetimes are read as local wall-clock time.
    """
    if now is None:
        now = datetime.now()
    january_zero = datetime(now.year, 1, 1, tzinfo=now.tzinfo) - ONE_DAY
    return (now - january_zero) // ONE_DAY


def select_daily_word(words: Sequence[str] = WORD_LIST, now: Optional[datetime] = None) -> str:
    """
    Returns today's puzzle word, lower-cased.

    The day number indexes the list directly; days past the end of the list
    wrap around to the start.

    Raises:
        ValueError: If the word list is empty
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    index = day_of_year(now)
    if index >= len(words):
        wrapped = index % len(words)
        logger.debug("Day %d is past the end of a %d-word list, wrapping to %d", index, len(words), wrapped)
        index = wrapped

    return words[index].lower()


def daily_config(now: Optional[datetime] = None,
                 words: Optional[List[str]] = None,
                 max_attempts: int = NUMBER_OF_TRIES) -> GameConfig:
    """Builds the game configuration for the puzzle of the given day."""
    word = select_daily_word(WORD_LIST if words is None else words, now)
    return GameConfig(word=word, max_attempts=max_attempts)
