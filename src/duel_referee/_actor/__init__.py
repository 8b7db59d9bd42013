# Area: Actors
"""
Actor channel implementations.

This package contains:
- SubprocessActor, which drives a player program over pipes
- TimeoutLineReader, the deadline-bounded line reader it uses
"""

from .line_reader import TimeoutLineReader
from .subprocess_actor import SubprocessActor, DEFAULT_TIMEOUT

__all__ = [
    "TimeoutLineReader",
    "SubprocessActor",
    "DEFAULT_TIMEOUT",
]
