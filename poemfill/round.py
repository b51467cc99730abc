# round.py — one playable two-line puzzle and its fill/undo state
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class BlankPosition(NamedTuple):
    line: int    # 0 or 1
    index: int   # character offset within the line


@dataclass(frozen=True)
class Candidate:
    """A removed character offered back to the player."""
    id: int
    char: str
    line_text: str          # full source line, for pronunciation context
    origin: BlankPosition   # where it was taken from


@dataclass(frozen=True)
class Assignment:
    char: str
    matches: bool   # char == the original character at that blank


class FillStatus(Enum):
    FILLED = "filled"
    BLOCKED = "blocked"    # blank already taken or candidate already used
    SOLVED = "solved"      # round finished correctly; no more moves


@dataclass(frozen=True)
class FillResult:
    status: FillStatus
    position: BlankPosition
    assignment: Optional[Assignment] = None

    @property
    def ok(self) -> bool:
        return self.status is FillStatus.FILLED


@dataclass
class _FillState:
    assignments: Dict[BlankPosition, Optional[Assignment]]
    consumed: Set[int] = field(default_factory=set)
    last_action: Optional[Tuple[BlankPosition, int]] = None


class Round:
    """Mutable state of one round.

    Only the most recent fill can be undone. `restore()` returns the round
    to the fully blanked snapshot taken right after generation.
    """

    def __init__(self, lines: Tuple[str, str], blanks: List[BlankPosition], candidates: List[Candidate]):
        self.lines = tuple(lines)
        self.blanks: Tuple[BlankPosition, ...] = tuple(blanks)
        self.candidates: Tuple[Candidate, ...] = tuple(candidates)
        self._by_id: Dict[int, Candidate] = {c.id: c for c in self.candidates}
        self.solved = False
        self._state = _FillState(assignments={pos: None for pos in self.blanks})
        self._snapshot = copy.deepcopy(self._state)

    # ---------------------- Queries ----------------------

    @property
    def assignments(self) -> Dict[BlankPosition, Optional[Assignment]]:
        return dict(self._state.assignments)

    @property
    def last_action(self) -> Optional[Tuple[BlankPosition, int]]:
        return self._state.last_action

    @property
    def can_undo(self) -> bool:
        return self._state.last_action is not None and not self.solved

    def original_char(self, pos: BlankPosition) -> str:
        return self.lines[pos.line][pos.index]

    def is_blank(self, pos: BlankPosition) -> bool:
        return pos in self._state.assignments

    def is_locked(self, pos: BlankPosition) -> bool:
        """True when nothing can be dropped on `pos` right now."""
        if pos not in self._state.assignments:
            raise KeyError(f"{pos} is not a blank in this round")
        return self.solved or self._state.assignments[pos] is not None

    def candidate(self, candidate_id: int) -> Candidate:
        return self._by_id[candidate_id]

    def is_consumed(self, candidate_id: int) -> bool:
        return candidate_id in self._state.consumed

    def available_candidates(self) -> List[Candidate]:
        return [c for c in self.candidates if c.id not in self._state.consumed]

    def empty_blanks(self) -> List[BlankPosition]:
        return [pos for pos in self.blanks if self._state.assignments[pos] is None]

    def display_char(self, line: int, index: int) -> Optional[str]:
        """Character shown at a grid cell; None for an empty blank."""
        pos = BlankPosition(line, index)
        if pos in self._state.assignments:
            a = self._state.assignments[pos]
            return a.char if a is not None else None
        return self.lines[line][index]

    # ---------------------- Moves ----------------------

    def fill(self, pos: BlankPosition, candidate_id: int) -> FillResult:
        pos = BlankPosition(*pos)
        cand = self.candidate(candidate_id)
        if self.solved:
            return FillResult(FillStatus.SOLVED, pos)
        if self.is_locked(pos) or cand.id in self._state.consumed:
            logger.debug("Blocked fill of %s with candidate %d", pos, candidate_id)
            return FillResult(FillStatus.BLOCKED, pos, self._state.assignments[pos])

        assignment = Assignment(cand.char, cand.char == self.original_char(pos))
        self._state.assignments[pos] = assignment
        self._state.consumed.add(cand.id)
        self._state.last_action = (pos, cand.id)
        return FillResult(FillStatus.FILLED, pos, assignment)

    def undo(self) -> bool:
        """Reverse the most recent fill. False when there is nothing to undo."""
        if self.solved or self._state.last_action is None:
            return False
        pos, candidate_id = self._state.last_action
        self._state.assignments[pos] = None
        self._state.consumed.discard(candidate_id)
        self._state.last_action = None
        return True

    def restore(self) -> None:
        """Empty every blank and give every candidate back (same layout)."""
        self._state = copy.deepcopy(self._snapshot)
        self.solved = False

    def mark_solved(self) -> None:
        self.solved = True
