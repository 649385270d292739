import random
from enum import Enum

from ..utils.constants import MOVES, MOVE_RULES, MOVE_NAMES, MOVE_ICONS


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def display_name(self):
        return MOVE_NAMES[self.value]

    @property
    def icon_key(self):
        return MOVE_ICONS[self.value]


class Outcome(Enum):
    TIE = "tie"
    WIN = "win"
    LOSS = "loss"


# Each move maps to the set of moves it beats
DOMINANCE = {
    Move(move): frozenset(Move(beaten) for beaten in MOVE_RULES[move])
    for move in MOVES
}


def ties(a, b):
    return a == b


def beats(a, b):
    """True if `a` dominates `b`. Equal moves never beat each other."""
    return b in DOMINANCE[a]


def determine_outcome(player, opponent):
    """Compare two moves from the player's point of view."""
    if ties(player, opponent):
        return Outcome.TIE
    if beats(player, opponent):
        return Outcome.WIN
    return Outcome.LOSS


def random_move(rng=None):
    """Pick one of the moves uniformly.

    `rng` is anything with a `choice(seq)` method, e.g. `random.Random(seed)`.
    Defaults to the module level generator.
    """
    if rng is None:
        rng = random
    return rng.choice(list(Move))
