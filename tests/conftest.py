# Area: Tests
"""Shared in-memory actors and paths for the test suite."""

import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from duel_referee.actor import Actor
from duel_referee.errors import ReadTimeoutError, WriteError

RESOURCES = Path(__file__).parent / "resources"
PLAYERS = Path(__file__).parent.parent / "examples" / "players"
PYTHON = sys.executable

# Interpreter start-up on a busy CI machine can exceed 200 ms.
SCRIPT_TIMEOUT = 2.0


class ScriptedActor(Actor):
    """Replies with a fixed sequence of lines and records what it is told."""

    def __init__(self, replies: Iterable[str], name: str = "scripted"):
        self.name = name
        self.replies: List[str] = list(replies)
        self.heard: List[str] = []
        self.asked = 0

    def ask(self) -> str:
        self.asked += 1
        if not self.replies:
            raise ReadTimeoutError(self.name, 0.2)
        return self.replies.pop(0)

    def say(self, line: str) -> None:
        self.heard.append(line)


class RepeatingActor(ScriptedActor):
    """Replies with the same line forever."""

    def __init__(self, reply: str, name: str = "repeating"):
        super().__init__([], name=name)
        self.reply = reply

    def ask(self) -> str:
        self.asked += 1
        return self.reply


class TitForTatActor(Actor):
    """Starts with a given choice, then repeats the opponent's last move."""

    def __init__(self, first_choice: str, name: str = "tit_for_tat"):
        self.name = name
        self.started = False
        self.next_choice = first_choice

    def ask(self) -> str:
        return self.next_choice

    def say(self, line: str) -> None:
        if not self.started:
            self.started = True
        else:
            self.next_choice = line


class ClosedActor(ScriptedActor):
    """Fails every write, like a player whose stdin pipe is gone."""

    def say(self, line: str) -> None:
        raise WriteError(self.name, "pipe is closed")


class EventLog:
    """Records the global order of ask/say calls across actors."""

    def __init__(self):
        self.events: List[str] = []

    def wrap(self, actor: Actor, label: Optional[str] = None) -> Actor:
        log = self.events
        label = label or actor.name

        class Logged(Actor):
            name = actor.name

            def ask(self) -> str:
                log.append(f"ask {label}")
                return actor.ask()

            def say(self, line: str) -> None:
                log.append(f"say {label} {line}")
                actor.say(line)

        return Logged()


@pytest.fixture
def event_log():
    return EventLog()
