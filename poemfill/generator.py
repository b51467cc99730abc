# generator.py — build a new round from the corpus
from __future__ import annotations

import logging
import random
from typing import List, Optional, TypeVar

from poemfill.corpus import Corpus
from poemfill.round import BlankPosition, Candidate, Round
from poemfill.settings import ConfigError, GameConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fisher_yates(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """Shuffle a copy of `items` (Durstenfeld variant, walking from the end)."""
    rng = rng or random
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out


def start_round(corpus: Corpus, config: Optional[GameConfig] = None,
                rng: Optional[random.Random] = None) -> Round:
    config = (config or GameConfig()).validate()
    if corpus.line_length != config.line_length:
        raise ConfigError(
            f"Corpus lines have {corpus.line_length} characters, config expects {config.line_length}"
        )
    rng = rng or random

    section_index, start, lines = corpus.random_pair(rng)

    grid = [BlankPosition(line, index) for line in range(2) for index in range(config.line_length)]
    blanks = fisher_yates(grid, rng)[:config.remove_count]

    removed = [
        Candidate(id=n, char=lines[pos.line][pos.index], line_text=lines[pos.line], origin=pos)
        for n, pos in enumerate(blanks)
    ]
    # Second, independent shuffle so the tray order says nothing about blank order.
    candidates = fisher_yates(removed, rng)

    logger.info("New round: section %d, lines %d-%d", section_index, start, start + 1)
    logger.debug("Blanks %s", sorted(blanks))
    return Round(lines, blanks, candidates)
