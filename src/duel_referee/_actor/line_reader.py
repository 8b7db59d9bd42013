# Area: Actors
"""
duel_referee._actor.line_reader — Line reads with a deadline
============================================================

Reads newline-terminated lines from a pipe without ever blocking past
a per-call deadline. The pipe's file descriptor is watched with
``selectors`` and drained with ``os.read``, so no helper thread is
involved and a read can be abandoned at any moment.

Bytes that arrive without a terminating newline stay in the buffer.
A timed-out call therefore never loses or splits data; the next call
continues from exactly where the previous one stopped.

``selectors`` only supports pipes on POSIX systems. On Windows the
actor channel cannot be used.
"""

from __future__ import annotations

import os
import selectors
import time
from typing import BinaryIO

from ..errors import ReadTimeoutError, UnexpectedEofError

CHUNK_SIZE = 4096


class TimeoutLineReader:
    """Buffered line reader with a per-call timeout."""

    def __init__(self, stream: BinaryIO, timeout: float, name: str):
        self.timeout = float(timeout)
        self.name = name
        self._stream = stream
        self._fd = stream.fileno()
        self._buffer = bytearray()
        self._eof = False
        self._selector = selectors.DefaultSelector()
        self._selector.register(self._fd, selectors.EVENT_READ)

    def readline(self) -> str:
        """
        Return the next complete line, stripped of trailing whitespace.

        Raises
        ------
        ReadTimeoutError
            If no complete line is available before the deadline.
        UnexpectedEofError
            If the stream ends before a complete line is available.
        """
        deadline = time.monotonic() + self.timeout

        while True:
            end = self._buffer.find(b"\n")
            if end >= 0:
                raw = bytes(self._buffer[:end])
                del self._buffer[:end + 1]
                return raw.decode("utf-8", errors="replace").rstrip()

            if self._eof:
                raise UnexpectedEofError(self.name)

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ReadTimeoutError(self.name, self.timeout)

            if not self._selector.select(timeout=remaining):
                continue

            chunk = os.read(self._fd, CHUNK_SIZE)
            if not chunk:
                self._eof = True
            else:
                self._buffer += chunk

    def pending(self) -> bytes:
        """Bytes received but not yet returned as a line."""
        return bytes(self._buffer)

    def close(self) -> None:
        try:
            self._selector.unregister(self._fd)
        except (KeyError, ValueError):
            pass
        self._selector.close()
