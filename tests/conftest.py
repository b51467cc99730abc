import random

import pytest

from poemfill.corpus import Corpus, Section
from poemfill.round import BlankPosition, Candidate, Round

SCENARIO_LINES = ("太阳哈哈笑", "背上小书包")
SCENARIO_BLANKS = [
    BlankPosition(0, 1),
    BlankPosition(0, 3),
    BlankPosition(1, 0),
    BlankPosition(1, 4),
]


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def build_round(lines=SCENARIO_LINES, blanks=SCENARIO_BLANKS, order=None):
    cands = [
        Candidate(id=n, char=lines[p.line][p.index], line_text=lines[p.line], origin=p)
        for n, p in enumerate(blanks)
    ]
    if order is not None:
        cands = [cands[i] for i in order]
    return Round(lines, list(blanks), cands)


def candidate_for(rnd: Round, pos: BlankPosition) -> int:
    """Id of the candidate taken from `pos`."""
    return next(c.id for c in rnd.candidates if c.origin == pos)


@pytest.fixture
def make_round():
    return build_round


@pytest.fixture
def scenario_round():
    # tray order deliberately differs from blank order
    return build_round(order=[2, 0, 3, 1])


@pytest.fixture
def corpus():
    return Corpus(sections=(
        Section(("太阳哈哈笑", "背上小书包", "路上遇花猫", "蝴蝶飞呀飞")),
        Section(("夜晚星星亮", "数星眨眼睛", "月亮弯弯笑")),
    ))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pick():
    return candidate_for
