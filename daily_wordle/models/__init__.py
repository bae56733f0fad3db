"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameConfig, GameSnapshot, GameState, Grid, KeyboardStatus, LetterStatus, Outcome, TransitionResult,
)

__all__ = [
    'GameConfig', 'GameSnapshot', 'GameState', 'Grid', 'KeyboardStatus',
    'LetterStatus', 'Outcome', 'TransitionResult'
]
