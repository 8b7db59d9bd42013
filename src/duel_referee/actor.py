# Area: Actors
"""
duel_referee.actor — The conversational capability games talk to
=================================================================

Every participant of a game is an Actor: something the referee can
ask for a line and say a line to. Games only ever see this interface,
so a real player program and an in-memory test double are
interchangeable.

The production implementation is SubprocessActor, which drives an
external program over its standard input/output:

    from duel_referee import SubprocessActor

    with SubprocessActor.from_program("./my_bot") as actor:
        actor.say("10")
        move = actor.ask()
"""

from abc import ABC, abstractmethod


class Actor(ABC):
    """
    Abstract base class for a game participant.

    Implementations raise a subclass of ActorError when the
    conversation cannot continue (timeout, closed stream, ...).
    """

    name: str = "actor"

    @abstractmethod
    def ask(self) -> str:
        """
        Receive the next line from the participant.

        Returns
        -------
        str
            The line without its trailing newline.
        """
        ...

    @abstractmethod
    def say(self, line: str) -> None:
        """
        Deliver one line to the participant.

        Parameters
        ----------
        line : str
            Text without the trailing newline; the actor adds it.
        """
        ...
