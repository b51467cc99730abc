from itertools import permutations

from poemfill.evaluator import Verdict, evaluate
from poemfill.round import BlankPosition

SCENARIO_BLANKS = [
    BlankPosition(0, 1), BlankPosition(0, 3), BlankPosition(1, 0), BlankPosition(1, 4),
]


def test_incomplete_until_every_blank_is_filled(scenario_round, pick):
    assert evaluate(scenario_round) is Verdict.INCOMPLETE
    for pos in SCENARIO_BLANKS[:-1]:
        scenario_round.fill(pos, pick(scenario_round, pos))
        assert evaluate(scenario_round) is Verdict.INCOMPLETE


def test_all_correct_in_any_order(make_round, pick):
    for order in permutations(SCENARIO_BLANKS):
        rnd = make_round()
        for pos in order:
            rnd.fill(pos, pick(rnd, pos))
        assert evaluate(rnd) is Verdict.CORRECT


def test_one_wrong_character_is_incorrect(scenario_round, pick):
    scenario_round.fill(BlankPosition(0, 1), pick(scenario_round, BlankPosition(0, 1)))
    scenario_round.fill(BlankPosition(0, 3), pick(scenario_round, BlankPosition(0, 3)))
    scenario_round.fill(BlankPosition(1, 0), pick(scenario_round, BlankPosition(1, 4)))
    scenario_round.fill(BlankPosition(1, 4), pick(scenario_round, BlankPosition(1, 0)))
    assert evaluate(scenario_round) is Verdict.INCORRECT


def test_repeated_characters_are_interchangeable(make_round, pick):
    # 哈 appears twice in 太阳哈哈笑
    blanks = [BlankPosition(0, 2), BlankPosition(0, 3)]
    rnd = make_round(blanks=blanks)
    rnd.fill(blanks[0], pick(rnd, blanks[1]))
    rnd.fill(blanks[1], pick(rnd, blanks[0]))
    assert evaluate(rnd) is Verdict.CORRECT


def test_evaluate_does_not_change_the_round(scenario_round, pick):
    scenario_round.fill(BlankPosition(0, 1), pick(scenario_round, BlankPosition(0, 1)))
    before = (scenario_round.assignments, scenario_round.last_action)
    for _ in range(3):
        evaluate(scenario_round)
    assert (scenario_round.assignments, scenario_round.last_action) == before
