# evaluator.py — is the round finished, and is it right?
from __future__ import annotations

from enum import Enum

from poemfill.round import Round


class Verdict(Enum):
    INCOMPLETE = "incomplete"
    CORRECT = "correct"
    INCORRECT = "incorrect"


def evaluate(rnd: Round) -> Verdict:
    """Read-only check of the round's assignments."""
    assignments = rnd.assignments
    if any(a is None for a in assignments.values()):
        return Verdict.INCOMPLETE
    if all(a.char == rnd.original_char(pos) for pos, a in assignments.items()):
        return Verdict.CORRECT
    return Verdict.INCORRECT
