import logging
from pathlib import Path

import pytest

from poemfill.settings import ConfigError, GameConfig


def test_defaults_are_valid():
    cfg = GameConfig().validate()
    assert cfg.line_length == 5
    assert cfg.remove_count == 4
    assert cfg.restore_delay == 1.5
    assert cfg.grid_size == 10


@pytest.mark.parametrize("kwargs", [
    {"line_length": 0},
    {"line_length": -3},
    {"remove_count": 0},
    {"remove_count": 11},
    {"line_length": 2, "remove_count": 5},
    {"restore_delay": -1},
])
def test_invalid_configs(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs).validate()


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(remove_count=50).validate()


def test_from_env_overrides():
    cfg = GameConfig.from_env({
        "POEMFILL_REMOVE_COUNT": "6",
        "POEMFILL_RESTORE_DELAY": "2.5",
        "POEMFILL_CORPUS": "/tmp/poems.txt",
        "POEMFILL_LOG_LEVEL": "debug",
    })
    assert cfg.remove_count == 6
    assert cfg.restore_delay == 2.5
    assert cfg.corpus_path == Path("/tmp/poems.txt")
    assert cfg.log_level == logging.DEBUG


def test_from_env_empty_gives_defaults():
    assert GameConfig.from_env({}) == GameConfig()


@pytest.mark.parametrize("env", [
    {"POEMFILL_REMOVE_COUNT": "four"},
    {"POEMFILL_REMOVE_COUNT": "20"},
    {"POEMFILL_LOG_LEVEL": "chatty"},
])
def test_from_env_rejects_bad_values(env):
    with pytest.raises(ConfigError):
        GameConfig.from_env(env)
