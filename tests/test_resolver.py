import itertools

import pytest

from rps_engine.domain.entities.choice import Choice, Result
from rps_engine.domain.services.resolver import resolve

R, P, S = Choice.ROCK, Choice.PAPER, Choice.SCISSORS


@pytest.mark.parametrize("player, computer, expected", [
    (R, R, Result.TIE), (R, P, Result.LOSS), (R, S, Result.WIN),
    (P, R, Result.WIN), (P, P, Result.TIE), (P, S, Result.LOSS),
    (S, R, Result.LOSS), (S, P, Result.WIN), (S, S, Result.TIE),
])
def test_rule_table(player, computer, expected):
    assert resolve(player, computer) == expected


@pytest.mark.parametrize("player, computer", list(itertools.product(Choice, Choice)))
def test_tie_only_on_equal_choices_and_antisymmetric_otherwise(player, computer):
    forward = resolve(player, computer)
    backward = resolve(computer, player)

    if player == computer:
        assert forward == backward == Result.TIE
    else:
        assert {forward, backward} == {Result.WIN, Result.LOSS}


def test_canonical_beats_relations():
    assert resolve(Choice.ROCK, Choice.SCISSORS) == Result.WIN
    assert resolve(Choice.PAPER, Choice.ROCK) == Result.WIN
    assert resolve(Choice.SCISSORS, Choice.PAPER) == Result.WIN
