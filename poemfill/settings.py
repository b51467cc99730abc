# settings.py — things that can be changed
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ---------------------- Defaults ----------------------
LINE_LENGTH = 5          # characters per poem line
REMOVE_COUNT = 4         # blanks per round
RESTORE_DELAY = 1.5      # seconds the "try again" message stays up
CORPUS_PATH_DEFAULT = Path(__file__).resolve().parent / "poet.txt"

SPEECH_LANG = "zh-CN"
SPEECH_RATE = 0.8        # browser SpeechSynthesis fallback
SPEECH_PITCH = 1.2

LOG_FILE_NAME = "poemfill.log"   # written inside POEMFILL_LOG_DIR when set


class PoemFillError(Exception):
    """Base class for errors raised by the game engine."""


class ConfigError(PoemFillError, ValueError):
    """Bad game configuration (programmer error, fail fast)."""


class CorpusError(PoemFillError):
    """Poem text yielded no playable section."""


@dataclass
class GameConfig:
    line_length: int = LINE_LENGTH
    remove_count: int = REMOVE_COUNT
    restore_delay: float = RESTORE_DELAY
    corpus_path: Path = CORPUS_PATH_DEFAULT
    speech_lang: str = SPEECH_LANG
    speech_rate: float = SPEECH_RATE
    speech_pitch: float = SPEECH_PITCH
    use_gtts: bool = True
    use_pronunciation_overrides: bool = True
    log_level: int = logging.INFO
    log_file: Optional[Path] = None

    @property
    def grid_size(self) -> int:
        return 2 * self.line_length

    def validate(self) -> "GameConfig":
        if self.line_length <= 0:
            raise ConfigError(f"line_length must be positive, got {self.line_length}")
        if self.remove_count <= 0:
            raise ConfigError(f"remove_count must be positive, got {self.remove_count}")
        if self.remove_count > self.grid_size:
            raise ConfigError(
                f"remove_count {self.remove_count} exceeds the {self.grid_size} "
                f"positions of a {self.line_length}-character line pair"
            )
        if self.restore_delay < 0:
            raise ConfigError(f"restore_delay must not be negative, got {self.restore_delay}")
        return self

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """Build a config from POEMFILL_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        cfg = cls()
        try:
            if "POEMFILL_LINE_LENGTH" in env:
                cfg.line_length = int(env["POEMFILL_LINE_LENGTH"])
            if "POEMFILL_REMOVE_COUNT" in env:
                cfg.remove_count = int(env["POEMFILL_REMOVE_COUNT"])
            if "POEMFILL_RESTORE_DELAY" in env:
                cfg.restore_delay = float(env["POEMFILL_RESTORE_DELAY"])
        except ValueError as e:
            raise ConfigError(f"Invalid POEMFILL_* setting: {e}") from e
        if env.get("POEMFILL_CORPUS"):
            cfg.corpus_path = Path(env["POEMFILL_CORPUS"])
        level = env.get("POEMFILL_LOG_LEVEL")
        if level:
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ConfigError(f"Unknown log level: {level}")
            cfg.log_level = resolved
        if env.get("POEMFILL_LOG_DIR"):
            cfg.log_file = Path(env["POEMFILL_LOG_DIR"]) / LOG_FILE_NAME
        return cfg.validate()
