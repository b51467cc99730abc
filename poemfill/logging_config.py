# logging_config.py — console + optional file logging for the game
from __future__ import annotations

import logging
import sys
from typing import Optional

from poemfill.settings import GameConfig

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _drop_own_handlers(logger: logging.Logger) -> None:
    for h in [h for h in logger.handlers if getattr(h, "_poemfill", False)]:
        logger.removeHandler(h)
        h.close()


def setup_logging(config: Optional[GameConfig] = None) -> logging.Logger:
    """Send the ``poemfill`` loggers to stderr, and to ``config.log_file`` if set.

    Streamlit runs main.py again on every tap, so handlers left by an earlier
    run are swapped out rather than stacked. Handlers someone else attached
    are left alone.
    """
    config = config or GameConfig()
    logger = logging.getLogger("poemfill")
    logger.setLevel(config.log_level)
    _drop_own_handlers(logger)

    handlers: list = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file, mode="a", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for h in handlers:
        h.setFormatter(formatter)
        h._poemfill = True
        logger.addHandler(h)
    return logger
