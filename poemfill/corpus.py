# corpus.py — poem sections the game draws line pairs from
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from poemfill.settings import LINE_LENGTH, ConfigError, CorpusError

logger = logging.getLogger(__name__)

SECTION_DELIMITER = "==="

# Used whenever poet.txt is missing or has nothing playable.
DEFAULT_SECTION: Tuple[str, ...] = (
    "太阳哈哈笑",
    "背上小书包",
    "路上遇花猫",
    "蝴蝶飞呀飞",
)


@dataclass(frozen=True)
class Section:
    """Consecutive poem lines, all the same length, at least two of them."""
    lines: Tuple[str, ...]

    def __post_init__(self):
        if len(self.lines) < 2:
            raise CorpusError(f"A section needs at least 2 lines, got {len(self.lines)}")
        lengths = {len(line) for line in self.lines}
        if len(lengths) != 1:
            raise CorpusError(f"Section lines differ in length: {sorted(lengths)}")

    @property
    def line_length(self) -> int:
        return len(self.lines[0])

    def __len__(self) -> int:
        return len(self.lines)

    def pair_at(self, start: int) -> Tuple[str, str]:
        return self.lines[start], self.lines[start + 1]


@dataclass(frozen=True)
class Corpus:
    sections: Tuple[Section, ...]
    is_fallback: bool = False

    def __post_init__(self):
        if not self.sections:
            raise CorpusError("Corpus has no sections")
        lengths = {s.line_length for s in self.sections}
        if len(lengths) != 1:
            raise CorpusError(f"Corpus mixes line lengths: {sorted(lengths)}")

    @property
    def line_length(self) -> int:
        return self.sections[0].line_length

    def random_pair(self, rng: Optional[random.Random] = None) -> Tuple[int, int, Tuple[str, str]]:
        """Pick a section uniformly, then two adjacent lines within it.

        Returns (section_index, start_index, (line0, line1)).
        """
        rng = rng or random
        section_index = rng.randrange(len(self.sections))
        section = self.sections[section_index]
        start = rng.randint(0, len(section) - 2)
        return section_index, start, section.pair_at(start)

    @classmethod
    def default(cls) -> "Corpus":
        return cls(sections=(Section(DEFAULT_SECTION),), is_fallback=True)


# ---------------------- Loading ----------------------

def parse_sections(text: str, line_length: int = LINE_LENGTH) -> List[Tuple[str, ...]]:
    """Split poem text on '===' and keep lines of exactly `line_length` characters."""
    out: List[Tuple[str, ...]] = []
    for raw in text.strip().split(SECTION_DELIMITER):
        lines = [ln.strip() for ln in raw.strip().splitlines()]
        kept = tuple(ln for ln in lines if len(ln) == line_length)
        dropped = sum(1 for ln in lines if ln and len(ln) != line_length)
        if dropped:
            logger.debug("Dropped %d line(s) not %d characters long", dropped, line_length)
        if len(kept) >= 2:
            out.append(kept)
    return out


def parse_corpus(text: str, line_length: int = LINE_LENGTH) -> Corpus:
    sections = parse_sections(text, line_length)
    if not sections:
        raise CorpusError(f"No section with 2+ lines of {line_length} characters")
    return Corpus(sections=tuple(Section(lines) for lines in sections))


def default_corpus(line_length: int = LINE_LENGTH) -> Corpus:
    if line_length != len(DEFAULT_SECTION[0]):
        # The built-in lines only fit the default length.
        raise ConfigError(
            f"No built-in fallback poem for line_length={line_length}"
        )
    return Corpus.default()


def load_corpus(path: Path | str, line_length: int = LINE_LENGTH) -> Corpus:
    """Read the poem file; on any failure fall back to the built-in section."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        corpus = parse_corpus(text, line_length)
    except (OSError, UnicodeDecodeError, CorpusError) as e:
        logger.warning("Could not load poems from %s (%s); using built-in poem", path, e)
        return default_corpus(line_length)
    logger.info(
        "Loaded %d section(s), %d line(s) from %s",
        len(corpus.sections), sum(len(s) for s in corpus.sections), path,
    )
    return corpus
