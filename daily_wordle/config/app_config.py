"""
Server Configuration

Environment-driven settings for the Flask/Socket.IO server. Game rules are
fixed in game_settings.py and are not read from the environment.
"""

import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Settings shared by every environment."""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')

    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # When false, /new_game ignores a requested word and serves today's puzzle
    ALLOW_CUSTOM_WORDS = _env_flag('ALLOW_CUSTOM_WORDS')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    ALLOW_CUSTOM_WORDS = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    ALLOW_CUSTOM_WORDS = True


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
