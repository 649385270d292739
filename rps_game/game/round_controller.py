import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .game_logic import Move, Outcome, determine_outcome, random_move
from ..utils.constants import (
    LABEL_WIN, LABEL_LOSS, LABEL_TIE,
    ICON_WIN, ICON_LOSS, ICON_TIE, ICON_DEFAULT,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    CHOOSING = "choosing"
    RESOLVED = "resolved"


class Accent(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"


class InvalidStateTransition(RuntimeError):
    """An entry point was called in a phase that has no transition for it."""

    def __init__(self, action, phase):
        super().__init__(f"cannot {action} while round is {phase.value}")
        self.action = action
        self.phase = phase


@dataclass(frozen=True)
class Round:
    """Snapshot of one round. Every transition publishes a new instance."""
    phase: Phase = Phase.IDLE
    player_move: Optional[Move] = None
    opponent_move: Optional[Move] = None
    outcome: Optional[Outcome] = None

    def __post_init__(self):
        resolved = self.phase is Phase.RESOLVED
        if (self.outcome is not None) != resolved:
            raise ValueError("outcome must be set exactly when the round is resolved")
        if resolved and (self.player_move is None or self.opponent_move is None):
            raise ValueError("a resolved round needs both moves")
        if not resolved and (self.player_move is not None or self.opponent_move is not None):
            raise ValueError(f"no moves allowed while {self.phase.value}")


_LABELS = {
    Outcome.WIN: LABEL_WIN,
    Outcome.LOSS: LABEL_LOSS,
    Outcome.TIE: LABEL_TIE,
}

_ACCENTS = {
    Outcome.WIN: Accent.SUCCESS,
    Outcome.LOSS: Accent.FAILURE,
    Outcome.TIE: Accent.WARNING,
}

_ICONS = {
    Outcome.WIN: ICON_WIN,
    Outcome.LOSS: ICON_LOSS,
    Outcome.TIE: ICON_TIE,
}


def outcome_label(outcome):
    return _LABELS.get(outcome, "")


def outcome_accent(outcome):
    return _ACCENTS.get(outcome, Accent.WARNING)


def outcome_icon(outcome):
    return _ICONS.get(outcome, ICON_DEFAULT)


class RoundController:
    """Owns the current round and the home -> game -> result flow.

    Readers get immutable `Round` snapshots; subscribers are called with the
    new snapshot after every change.
    """

    def __init__(self, rng=None):
        self.rng = rng
        self._round = Round()
        self._lock = threading.Lock()
        # Reentrant so a subscriber may trigger a transition from its callback
        self._publish_lock = threading.RLock()
        self._subscribers = []

    # --- Read access ---
    @property
    def round(self):
        return self._round

    @property
    def phase(self):
        return self._round.phase

    @property
    def player_move(self):
        return self._round.player_move

    @property
    def opponent_move(self):
        return self._round.opponent_move

    @property
    def outcome(self):
        return self._round.outcome

    @property
    def label(self):
        return outcome_label(self._round.outcome)

    @property
    def accent(self):
        return outcome_accent(self._round.outcome)

    @property
    def icon_key(self):
        return outcome_icon(self._round.outcome)

    # --- Change notification ---
    def subscribe(self, callback):
        """Register `callback(round)`. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, new_round):
        with self._publish_lock:
            for callback in list(self._subscribers):
                # A newer round has been published already; this one is stale
                if new_round is not self._round:
                    return
                callback(new_round)

    # --- Transitions ---
    def enter_game(self):
        with self._lock:
            self._require(Phase.IDLE, "enter game")
            self._round = Round(phase=Phase.CHOOSING)
            new_round = self._round
        logger.debug("Entered game screen")
        self._publish(new_round)
        return new_round

    def submit_move(self, move):
        with self._lock:
            self._require(Phase.CHOOSING, "submit a move")
            opponent = random_move(self.rng)
            self._round = Round(
                phase=Phase.RESOLVED,
                player_move=move,
                opponent_move=opponent,
                outcome=determine_outcome(move, opponent),
            )
            new_round = self._round
        logger.info(
            "Player picked %s, opponent picked %s: %s",
            move.display_name, opponent.display_name, outcome_label(new_round.outcome),
        )
        self._publish(new_round)
        return new_round

    def reset(self):
        with self._lock:
            if self._round == Round():
                return self._round
            self._round = Round()
            new_round = self._round
        logger.debug("Round reset")
        self._publish(new_round)
        return new_round

    def _require(self, phase, action):
        if self._round.phase is not phase:
            logger.warning("Rejected '%s' in phase %s", action, self._round.phase.value)
            raise InvalidStateTransition(action, self._round.phase)
