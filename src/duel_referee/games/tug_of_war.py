# Area: Games
"""
duel_referee.games.tug_of_war — Tug of War
==========================================

Each player starts with the same amount of energy and knows the number
of iterations. On every iteration both choose how much energy to
spend. Whoever spends strictly more earns 1 point; a tie earns nothing.
Energy is never replenished and a player may never spend more than it
has left.

Wire format:
    setup       referee → player   "<energy>", then "<iters>"
    iteration   player → referee   amount to spend (decimal)
                referee → player   amount the opponent spent
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from ..actor import Actor
from ..config import TugOfWarConfig
from ..result import Score, Side
from .base import Game, Seat

logger = logging.getLogger("duel_referee.games.tug_of_war")

Energy = int

_DECIMAL_RE = re.compile(r"[0-9]+")
EXPECTED_SPEND = "a non-negative decimal integer"


def parse_energy(line: str) -> Energy:
    """Parse a non-negative decimal integer; raise ValueError otherwise."""
    if not _DECIMAL_RE.fullmatch(line):
        raise ValueError(f"not a non-negative integer: {line!r}")
    return int(line)


class EnergySeat(Seat):
    """A seat that tracks how much energy its player has left."""

    def __init__(self, actor: Actor, side: Side, energy: Energy):
        super().__init__(actor, side)
        self.energy = energy

    def pull(self) -> Energy:
        """Ask for this iteration's spend and take it from the pool."""
        spent = self.ask_as(parse_energy, EXPECTED_SPEND)
        if spent > self.energy:
            raise self.violation(
                str(spent), f"spent <= energy, got {spent} > {self.energy}"
            )
        self.energy -= spent
        return spent


class TugOfWar(Game):
    """Tug of War over a fixed, non-renewable energy budget."""

    name = "tug_of_war"

    def __init__(self, energy: Energy = 100):
        if energy < 0:
            raise ValueError("energy must be non-negative")
        self.energy = energy

    @classmethod
    def from_config(cls, config: Optional[TugOfWarConfig] = None) -> "TugOfWar":
        config = config or TugOfWarConfig()
        return cls(energy=config.energy)

    def seat(self, actor: Actor, side: Side) -> EnergySeat:
        return EnergySeat(actor, side, self.energy)

    def setup(self, left: EnergySeat, right: EnergySeat, iters: int) -> None:
        logger.debug(f"[init] energy: {self.energy}, iterations: {iters}")
        for seat in (left, right):
            seat.say(str(seat.energy))
            seat.say(str(iters))

    def iteration(self, left: EnergySeat, right: EnergySeat) -> Tuple[Score, Score]:
        l_spent = left.pull()
        logger.debug(f"[>] pull: {l_spent} (left {left.energy})")
        r_spent = right.pull()
        logger.debug(f"[<] pull: {r_spent} (left {right.energy})")

        left.say(str(r_spent))
        right.say(str(l_spent))

        if l_spent > r_spent:
            return 1, 0
        if l_spent < r_spent:
            return 0, 1
        return 0, 0
