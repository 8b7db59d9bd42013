"""
duel_referee.errors — Custom exception classes
==============================================

Defines the exception hierarchy for actor and round failures.
Each actor error stores enough context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, TYPE_CHECKING

from .error_formatter import format_error_block

if TYPE_CHECKING:
    from .result import Side


class DuelRefereeError(Exception):
    """Base exception for all duel_referee package errors."""
    pass


class ConfigError(DuelRefereeError):
    """Raised when the configuration file or environment is invalid."""
    pass


class ActorError(DuelRefereeError):
    """Base class for failures caused by a player program."""

    error_type = "ACTOR_ERROR"

    def __init__(self, actor: str, detail: str):
        self.actor = actor
        self.detail = detail
        super().__init__(f"{actor}: {detail}")

    def context(self) -> Dict[str, Any]:
        return {}

    def format_error_log(self, side: Optional["Side"] = None) -> str:
        return format_error_block(
            error_type=self.error_type,
            actor=self.actor,
            side=side.value if side is not None else None,
            detail=self.detail,
            context=self.context(),
        )


class ProcessSpawnError(ActorError):
    """Raised when the player program cannot be started."""

    error_type = "PROCESS_SPAWN"

    def __init__(self, program: str, errno: Optional[int], reason: str):
        self.program = program
        self.errno = errno
        super().__init__(program, f"cannot start program: {reason}")

    def context(self) -> Dict[str, Any]:
        return {"program": self.program, "errno": self.errno}


class ScriptNotFoundError(ActorError):
    """Raised before spawning when the player script does not exist."""

    error_type = "SCRIPT_NOT_FOUND"

    def __init__(self, script: str):
        self.script = script
        super().__init__(script, f"script not exists: {script}")

    def context(self) -> Dict[str, Any]:
        return {"script": self.script}


class ReadTimeoutError(ActorError):
    """Raised when a player does not answer within the read timeout."""

    error_type = "READ_TIMEOUT"

    def __init__(self, actor: str, timeout: float):
        self.timeout = timeout
        super().__init__(actor, f"no line received within {timeout * 1000:.0f} ms")

    def context(self) -> Dict[str, Any]:
        return {"timeout_seconds": self.timeout}


class UnexpectedEofError(ActorError):
    """Raised when a player closes its output before sending a line."""

    error_type = "UNEXPECTED_EOF"

    def __init__(self, actor: str):
        super().__init__(actor, "output closed before a line was received")


class WriteError(ActorError):
    """Raised when the player's input pipe is closed."""

    error_type = "WRITE_FAILED"

    def __init__(self, actor: str, reason: str):
        super().__init__(actor, f"cannot write to program: {reason}")


class ProtocolViolationError(ActorError):
    """Raised when a player sends a line the game cannot accept."""

    error_type = "PROTOCOL_VIOLATION"

    def __init__(self, actor: str, line: str, expected: str):
        self.line = line
        self.expected = expected
        super().__init__(actor, f"unexpected reply {line!r}, expected {expected}")

    def context(self) -> Dict[str, Any]:
        return {"received": self.line, "expected": self.expected}


class SideError(DuelRefereeError):
    """An ActorError tagged with the side of the board that caused it."""

    def __init__(self, side: "Side", cause: ActorError):
        self.side = side
        self.cause = cause
        super().__init__(f"{side.value} player failed: {cause}")
