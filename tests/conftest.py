"""
Pytest fixtures for Daily Wordle tests.
"""

import os
import tempfile

# Log files go to a scratch directory; must be set before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily_wordle_logs_'))

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.models.game import GameConfig
from daily_wordle.services.game_engine import WordleEngine
from daily_wordle.services.game_service import initialize_game_service


@pytest.fixture
def rust_config() -> GameConfig:
    """Four-letter puzzle used throughout the examples."""
    return GameConfig(word="rust")


@pytest.fixture
def notifications() -> list:
    return []


@pytest.fixture
def clipboard() -> list:
    return []


@pytest.fixture
def engine(rust_config, notifications, clipboard) -> WordleEngine:
    """Engine on "rust" recording what it sends to its collaborators."""
    return WordleEngine(rust_config, notifier=notifications.append, clipboard=clipboard.append)


@pytest.fixture
def game_service():
    """Fresh global game service."""
    return initialize_game_service()


@pytest.fixture
def app_and_socketio(game_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
