# Area: Games
"""
duel_referee.games.base — Game protocol interface
=================================================

A Game encodes setup and per-iteration exchanges into lines, talks to
both players through Seats, and scores each iteration. The round
driver owns the loop and the running totals.

A Seat binds one actor to its side of the board for a single round.
Every actor failure that passes through a Seat comes out tagged with
that side, which is how the driver knows whom to blame. Games that
keep per-player state (remaining energy, ...) subclass Seat, so each
round starts from fresh state and Game objects stay reusable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Tuple, TypeVar

from ..actor import Actor
from ..errors import ActorError, ProtocolViolationError, SideError
from ..result import RoundResult, Score, Side

T = TypeVar("T")


class Seat:
    """One actor seated on one side for the duration of a round."""

    def __init__(self, actor: Actor, side: Side):
        self.actor = actor
        self.side = side

    @property
    def name(self) -> str:
        return getattr(self.actor, "name", self.side.value)

    def ask(self) -> str:
        try:
            return self.actor.ask()
        except ActorError as e:
            raise SideError(self.side, e) from e

    def say(self, line: str) -> None:
        try:
            self.actor.say(line)
        except ActorError as e:
            raise SideError(self.side, e) from e

    def ask_as(self, parse: Callable[[str], T], expected: str) -> T:
        """Ask for a line and convert it; bad lines are protocol violations."""
        line = self.ask()
        try:
            return parse(line)
        except ValueError as e:
            raise SideError(
                self.side, ProtocolViolationError(self.name, line, expected)
            ) from e

    def violation(self, line: str, expected: str) -> SideError:
        return SideError(self.side, ProtocolViolationError(self.name, line, expected))


class Game(ABC):
    """
    Abstract base class for a two-player iterated game.

    Subclasses implement setup() and iteration(). Override seat() to
    attach per-player round state.
    """

    name: str = "game"

    def seat(self, actor: Actor, side: Side) -> Seat:
        return Seat(actor, side)

    @abstractmethod
    def setup(self, left: Seat, right: Seat, iters: int) -> None:
        """Send the opening lines to both players."""
        ...

    @abstractmethod
    def iteration(self, left: Seat, right: Seat) -> Tuple[Score, Score]:
        """Play one exchange of moves and return the scores it earned."""
        ...

    def round(self, left: Actor, right: Actor, iters: int) -> RoundResult:
        """Play a whole round. See duel_referee.driver.play_round."""
        from ..driver import play_round
        return play_round(self, left, right, iters)
