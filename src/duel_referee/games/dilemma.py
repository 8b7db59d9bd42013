# Area: Games
"""
duel_referee.games.dilemma — Iterated Prisoner's Dilemma
========================================================

Both players are told the number of iterations. On every iteration
each one either cooperates (C) or defects (D):

    both defect          → both_defect each
    one defects          → betrayal_reward for the defector, 0 for the other
    both cooperate       → both_cooperate each

After every iteration each player learns the opponent's choice, which
makes retaliating strategies (tit-for-tat, ...) possible. The game
itself keeps no memory beyond the scores.

Wire format:
    setup       referee → player   "<iters>"
    iteration   player → referee   "COOPERATE" | "DEFECT"
                referee → player   opponent's decision
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from ..config import DilemmaConfig
from ..result import Score
from .base import Game, Seat

logger = logging.getLogger("duel_referee.games.dilemma")


class Decision(Enum):
    """A player's move. Values are the literal protocol tokens."""
    COOPERATE = "COOPERATE"
    DEFECT = "DEFECT"


EXPECTED_DECISION = "one of ['COOPERATE', 'DEFECT']"


class PrisonerDilemma(Game):
    """Iterated Prisoner's Dilemma with a configurable payoff matrix."""

    name = "dilemma"

    def __init__(self, both_defect: Score = 1, betrayal_reward: Score = 10,
                 both_cooperate: Score = 5):
        self.both_defect = both_defect
        self.betrayal_reward = betrayal_reward
        self.both_cooperate = both_cooperate

    @classmethod
    def from_config(cls, config: Optional[DilemmaConfig] = None) -> "PrisonerDilemma":
        config = config or DilemmaConfig()
        return cls(
            both_defect=config.both_defect,
            betrayal_reward=config.betrayal_reward,
            both_cooperate=config.both_cooperate,
        )

    def payoff(self, left: Decision, right: Decision) -> Tuple[Score, Score]:
        if left is Decision.COOPERATE and right is Decision.COOPERATE:
            return self.both_cooperate, self.both_cooperate
        if left is Decision.DEFECT and right is Decision.DEFECT:
            return self.both_defect, self.both_defect
        if left is Decision.DEFECT:
            return self.betrayal_reward, 0
        return 0, self.betrayal_reward

    def setup(self, left: Seat, right: Seat, iters: int) -> None:
        logger.debug(f"[init] iterations: {iters}")
        left.say(str(iters))
        right.say(str(iters))

    def iteration(self, left: Seat, right: Seat) -> Tuple[Score, Score]:
        l_decision = left.ask_as(Decision, EXPECTED_DECISION)
        logger.debug(f"[>] decision: {l_decision.value}")
        r_decision = right.ask_as(Decision, EXPECTED_DECISION)
        logger.debug(f"[<] decision: {r_decision.value}")

        left.say(r_decision.value)
        right.say(l_decision.value)

        return self.payoff(l_decision, r_decision)
