from __future__ import annotations

import itertools
import random
from collections import Counter

from rps_game.game.game_logic import Move, Outcome, beats, determine_outcome, random_move, ties


class FixedSequence:
    def __init__(self, moves: list[Move]) -> None:
        self._moves = itertools.cycle(moves)

    def choice(self, seq):
        return next(self._moves)


def test_exactly_one_relation_holds_for_every_pair() -> None:
    for a, b in itertools.product(Move, repeat=2):
        relations = [ties(a, b), beats(a, b), beats(b, a)]
        assert relations.count(True) == 1, (a, b)


def test_beats_is_irreflexive() -> None:
    for move in Move:
        assert not beats(move, move)


def test_beats_is_the_three_cycle() -> None:
    winning = {(a, b) for a, b in itertools.product(Move, repeat=2) if beats(a, b)}
    assert winning == {
        (Move.ROCK, Move.SCISSORS),
        (Move.SCISSORS, Move.PAPER),
        (Move.PAPER, Move.ROCK),
    }


def test_determine_outcome_matrix() -> None:
    assert determine_outcome(Move.ROCK, Move.SCISSORS) is Outcome.WIN
    assert determine_outcome(Move.SCISSORS, Move.PAPER) is Outcome.WIN
    assert determine_outcome(Move.PAPER, Move.ROCK) is Outcome.WIN

    assert determine_outcome(Move.SCISSORS, Move.ROCK) is Outcome.LOSS
    assert determine_outcome(Move.PAPER, Move.SCISSORS) is Outcome.LOSS
    assert determine_outcome(Move.ROCK, Move.PAPER) is Outcome.LOSS

    for move in Move:
        assert determine_outcome(move, move) is Outcome.TIE


def test_display_names() -> None:
    assert [m.display_name for m in Move] == ["Rock", "Paper", "Scissors"]


def test_random_move_is_roughly_uniform() -> None:
    rng = random.Random(1234)
    n = 30000
    counts = Counter(random_move(rng) for _ in range(n))
    assert set(counts) == set(Move)
    for move in Move:
        assert abs(counts[move] / n - 1 / 3) < 0.02


def test_random_move_with_fixed_sequence_is_repeatable() -> None:
    sequence = [Move.PAPER, Move.ROCK, Move.SCISSORS]
    assert [random_move(FixedSequence(sequence)) for _ in range(3)] == [Move.PAPER] * 3
    rng = FixedSequence(sequence)
    assert [random_move(rng) for _ in range(6)] == sequence * 2


def test_random_move_with_seeded_rng_is_deterministic() -> None:
    a = [random_move(random.Random(7)) for _ in range(5)]
    b = [random_move(random.Random(7)) for _ in range(5)]
    assert a == b


def test_random_move_defaults_to_module_generator() -> None:
    assert random_move() in set(Move)
