# session.py — owns the current round and applies the win / retry policy
from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Tuple

from poemfill.corpus import Corpus
from poemfill.evaluator import Verdict, evaluate
from poemfill.generator import start_round
from poemfill.pronunciation import resolve
from poemfill.round import BlankPosition, FillResult, FillStatus, Round
from poemfill.settings import GameConfig

logger = logging.getLogger(__name__)

SUCCESS_MESSAGES = [
    "🎉 太棒了！你真聪明！",
    "🌟 真厉害！全对了！",
    "👏 好极了！你是小天才！",
    "🏆 完美！继续加油！",
    "💪 你太棒了！真了不起！",
]
RETRY_MESSAGES = [
    "😊 再试一次吧！",
    "💪 别灰心，再来一次！",
    "🤔 想一想，再试试！",
    "👀 仔细看看，再试一次！",
]


class GameSession:
    """One player's game: the current round plus the pending "try again" restore.

    The restore after a wrong answer is a deadline rather than a timer thread;
    callers call `poll()` on each rerun and it fires once the deadline passes.
    Starting a new round cancels it.
    """

    def __init__(self, corpus: Corpus, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time):
        self.corpus = corpus
        self.config = (config or GameConfig()).validate()
        self.rng = rng or random.Random()
        self.clock = clock
        self.verdict: Optional[Verdict] = None
        self.message = ""
        self.restore_at: Optional[float] = None
        self.round: Round = start_round(self.corpus, self.config, self.rng)
        self.rounds_played = 1

    # ---------------------- Round lifecycle ----------------------

    def new_round(self) -> Round:
        self.cancel_pending_restore()
        self.round = start_round(self.corpus, self.config, self.rng)
        self.verdict = None
        self.message = ""
        self.rounds_played += 1
        return self.round

    @property
    def restore_pending(self) -> bool:
        return self.restore_at is not None

    @property
    def finished(self) -> bool:
        return self.round.solved

    def cancel_pending_restore(self) -> bool:
        if self.restore_at is None:
            return False
        logger.debug("Cancelled pending restore")
        self.restore_at = None
        return True

    def poll(self) -> bool:
        """Apply the pending restore if its deadline has passed."""
        if self.restore_at is None or self.clock() < self.restore_at:
            return False
        self.restore_at = None
        self.round.restore()
        self.verdict = None
        self.message = ""
        logger.info("Round restored for another try")
        return True

    def seconds_until_restore(self) -> float:
        if self.restore_at is None:
            return 0.0
        return max(0.0, self.restore_at - self.clock())

    # ---------------------- Moves ----------------------

    def fill(self, pos: BlankPosition, candidate_id: int) -> Tuple[FillResult, Optional[Verdict]]:
        pos = BlankPosition(*pos)
        if self.restore_pending:
            # Board is frozen until the wrong answer has been cleared.
            return FillResult(FillStatus.BLOCKED, pos, self.round.assignments[pos]), None
        result = self.round.fill(pos, candidate_id)
        if not result.ok:
            return result, None

        self.verdict = evaluate(self.round)
        if self.verdict is Verdict.CORRECT:
            self.round.mark_solved()
            self.message = self.rng.choice(SUCCESS_MESSAGES)
            logger.info("Round solved")
        elif self.verdict is Verdict.INCORRECT:
            self.message = self.rng.choice(RETRY_MESSAGES)
            self.restore_at = self.clock() + self.config.restore_delay
            logger.info("Wrong answer; restoring in %.1fs", self.config.restore_delay)
        return result, self.verdict

    def undo(self) -> bool:
        if self.restore_pending:
            return False
        undone = self.round.undo()
        if undone:
            self.verdict = evaluate(self.round)
        return undone

    @property
    def can_undo(self) -> bool:
        return not self.restore_pending and self.round.can_undo

    # ---------------------- Speech ----------------------

    def spoken_text(self, line_text: str, char: str) -> str:
        return resolve(line_text, char, enabled=self.config.use_pronunciation_overrides)

    def spoken_text_at(self, line: int, index: int) -> Optional[str]:
        """Speech text for the character currently shown at a grid cell."""
        char = self.round.display_char(line, index)
        if char is None:
            return None
        return self.spoken_text(self.round.lines[line], char)
