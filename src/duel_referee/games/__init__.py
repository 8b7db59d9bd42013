# Area: Games
"""
Built-in games.

This package contains:
- The Game/Seat protocol interface
- PrisonerDilemma (``dilemma``)
- TugOfWar (``tug_of_war``)
"""

from typing import Optional

from ..config import RefereeConfig
from .base import Game, Seat
from .dilemma import Decision, PrisonerDilemma
from .tug_of_war import EnergySeat, TugOfWar

GAMES = {
    PrisonerDilemma.name: PrisonerDilemma,
    TugOfWar.name: TugOfWar,
}


def build_game(name: str, config: Optional[RefereeConfig] = None) -> Game:
    """Instantiate a built-in game by name using its configuration section."""
    config = config or RefereeConfig()
    if name == PrisonerDilemma.name:
        return PrisonerDilemma.from_config(config.dilemma)
    if name == TugOfWar.name:
        return TugOfWar.from_config(config.tug_of_war)
    raise ValueError(f"Unknown game {name!r}, expected one of {sorted(GAMES)}")


__all__ = [
    "Game",
    "Seat",
    "Decision",
    "PrisonerDilemma",
    "EnergySeat",
    "TugOfWar",
    "GAMES",
    "build_game",
]
