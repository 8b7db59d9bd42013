# Area: Actors
"""
duel_referee._actor.subprocess_actor — Player programs as actors
================================================================

Spawns an external program with its stdin, stdout and stderr attached
to pipes owned by the referee, and exposes it through the Actor
interface:

- ask(): one line from the program's stdout, bounded by a timeout
- say(): one line to the program's stdin, flushed immediately

The actor owns the child process and every pipe. Use it as a context
manager so the pipes are released on every exit path:

    with SubprocessActor.from_script("python3", "bot.py") as actor:
        actor.say("COOPERATE")
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..actor import Actor
from ..errors import ProcessSpawnError, ScriptNotFoundError, WriteError
from .line_reader import TimeoutLineReader

logger = logging.getLogger("duel_referee.actor")

DEFAULT_TIMEOUT = 0.2         # seconds allowed for one ask()
CLOSE_GRACE_SECONDS = 0.5     # wait for a voluntary exit after stdin closes

PathLike = Union[str, "os.PathLike[str]"]


class SubprocessActor(Actor):
    """Line-oriented conversation with a child process."""

    def __init__(
        self,
        argv: Sequence[PathLike],
        timeout: float = DEFAULT_TIMEOUT,
        name: Optional[str] = None,
    ):
        self.argv: List[str] = [os.fspath(a) for a in argv]
        if not self.argv:
            raise ValueError("argv must name a program")
        self.name = name or Path(self.argv[-1]).name
        self._closed = False

        try:
            self._proc = subprocess.Popen(
                self.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                bufsize=0,
            )
        except OSError as e:
            raise ProcessSpawnError(
                program=self.argv[0],
                errno=e.errno,
                reason=e.strerror or str(e),
            ) from e

        self._reader = TimeoutLineReader(self._proc.stdout, timeout, self.name)
        logger.debug(f"Spawned {self.name} (pid={self._proc.pid}): {self.argv}")

    # ── Constructors ──────────────────────────────────────────

    @classmethod
    def from_program(
        cls,
        program: PathLike,
        timeout: float = DEFAULT_TIMEOUT,
        name: Optional[str] = None,
    ) -> "SubprocessActor":
        """Spawn an executable directly."""
        return cls([program], timeout=timeout, name=name)

    @classmethod
    def from_script(
        cls,
        interpreter: PathLike,
        script: PathLike,
        timeout: float = DEFAULT_TIMEOUT,
        name: Optional[str] = None,
    ) -> "SubprocessActor":
        """Spawn ``interpreter script``; the script must exist."""
        if not Path(script).exists():
            raise ScriptNotFoundError(os.fspath(script))
        return cls([interpreter, script], timeout=timeout, name=name)

    # ── Actor interface ───────────────────────────────────────

    def ask(self) -> str:
        line = self._reader.readline()
        logger.debug(f"[{self.name} <<] {line}")
        return line

    def say(self, line: str) -> None:
        if self._closed or not self.is_alive():
            raise WriteError(self.name, "process has exited")

        logger.debug(f"[{self.name} >>] {line}")
        try:
            self._proc.stdin.write((line + "\n").encode("utf-8"))
            self._proc.stdin.flush()
        except (BrokenPipeError, ValueError) as e:
            raise WriteError(self.name, "pipe is closed") from e
        except OSError as e:
            raise WriteError(self.name, e.strerror or str(e)) from e

    # ── Lifecycle ─────────────────────────────────────────────

    @property
    def timeout(self) -> float:
        """Seconds a single ask() may wait for a line."""
        return self._reader.timeout

    @timeout.setter
    def timeout(self, value: float) -> None:
        self._reader.timeout = float(value)

    @property
    def pid(self) -> int:
        return self._proc.pid

    def is_alive(self) -> bool:
        return self._proc.poll() is None

    def close(self) -> None:
        """Close the pipes and reap the child. Safe to call twice."""
        if self._closed:
            return
        self._closed = True

        # Losing stdin is the child's signal to finish.
        try:
            self._proc.stdin.close()
        except OSError:
            pass

        try:
            self._proc.wait(timeout=CLOSE_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            self._proc.terminate()
            try:
                self._proc.wait(timeout=CLOSE_GRACE_SECONDS)
            except subprocess.TimeoutExpired:
                self._proc.kill()
                self._proc.wait()

        self._reader.close()
        self._proc.stdout.close()
        self._proc.stderr.close()
        logger.debug(f"Closed {self.name} (exit code {self._proc.returncode})")

    def __enter__(self) -> "SubprocessActor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"SubprocessActor(name={self.name!r}, pid={self._proc.pid})"
