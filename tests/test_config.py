"""
Tests for the environment configuration classes.
"""

from daily_wordle.config import TestingConfig
from daily_wordle.config.app_config import ProductionConfig, config


def test_custom_words_only_in_testing():
    assert TestingConfig.ALLOW_CUSTOM_WORDS is True
    assert ProductionConfig.ALLOW_CUSTOM_WORDS is False


def test_config_lookup():
    assert config['testing'] is TestingConfig
    assert config['default'].DEBUG is True
    assert ProductionConfig.DEBUG is False
