# Area: Driver
"""
duel_referee.driver — The round loop
====================================

Plays one round of a game between two actors: setup, then the
requested number of iterations, summing the per-iteration scores.

The first failure attributable to a player ends the round at once.
Nothing is retried and no partial score is kept; the result names the
side that broke the round and carries the underlying error.
"""

from __future__ import annotations

import logging

from .actor import Actor
from .errors import SideError
from .games.base import Game
from .result import RoundResult, Side

logger = logging.getLogger("duel_referee.driver")


def play_round(game: Game, left: Actor, right: Actor, iters: int) -> RoundResult:
    """
    Play one round and return its outcome.

    Parameters
    ----------
    game : Game
        The game protocol to play.
    left, right : Actor
        The two players. Left is always asked and told first.
    iters : int
        Number of iterations, must be non-negative.

    Returns
    -------
    RoundResult
        Completed with both scores, or aborted with the failed side.
    """
    if isinstance(iters, bool) or not isinstance(iters, int) or iters < 0:
        raise ValueError(f"iters must be a non-negative integer, got {iters!r}")

    left_seat = game.seat(left, Side.LEFT)
    right_seat = game.seat(right, Side.RIGHT)

    logger.info(f"Starting {game.name}: {left_seat.name} vs {right_seat.name}, "
                f"{iters} iterations")

    try:
        game.setup(left_seat, right_seat, iters)

        score = [0, 0]
        for i in range(iters):
            res = game.iteration(left_seat, right_seat)
            logger.debug(f"[iter-{i:02}] result: {res}")
            score[0] += res[0]
            score[1] += res[1]
            logger.debug(f"[iter-{i:02}] score: {tuple(score)}")
    except SideError as e:
        logger.warning(f"{game.name} aborted by {e.side.value} player: {e.cause}")
        return RoundResult.aborted(game.name, iters, e.side, e.cause)

    logger.info(f"[result] score: {score[0]} {score[1]}")
    return RoundResult.completed(game.name, iters, (score[0], score[1]))
