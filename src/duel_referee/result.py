# Area: Driver
"""
duel_referee.result — Round outcome dataclasses
===============================================

Defines the Side enum and the RoundResult the round driver returns.
A result is either completed with both final scores, or aborted with
the side that broke the round and the underlying error. Partial
scores are never reported for an aborted round.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import ActorError

Score = int


class Side(Enum):
    """Position of a player in a round. Left always moves first."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass
class RoundResult:
    """
    Outcome of one round between two players.

    Attributes:
        game: Name of the game that was played
        iterations: Number of iterations requested
        left_score: Final score of the left player, None if aborted
        right_score: Final score of the right player, None if aborted
        status: 'completed' or 'aborted'
        failed_side: Side that caused the abort, if any
        error: Underlying actor error, if any
    """

    game: str
    iterations: int
    left_score: Optional[Score] = None
    right_score: Optional[Score] = None
    status: str = "completed"
    failed_side: Optional[Side] = None
    error: Optional[ActorError] = None

    @classmethod
    def completed(cls, game: str, iterations: int,
                  scores: Tuple[Score, Score]) -> "RoundResult":
        return cls(game=game, iterations=iterations,
                   left_score=scores[0], right_score=scores[1])

    @classmethod
    def aborted(cls, game: str, iterations: int, side: Side,
                error: ActorError) -> "RoundResult":
        return cls(game=game, iterations=iterations, status="aborted",
                   failed_side=side, error=error)

    @property
    def ok(self) -> bool:
        return self.status == "completed"

    @property
    def scores(self) -> Optional[Tuple[Score, Score]]:
        if not self.ok:
            return None
        return self.left_score, self.right_score

    def winner(self) -> Optional[Side]:
        """Side with the higher score, None on a draw or abort."""
        if not self.ok or self.left_score == self.right_score:
            return None
        return Side.LEFT if self.left_score > self.right_score else Side.RIGHT
