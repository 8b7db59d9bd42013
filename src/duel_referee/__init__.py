"""
duel_referee — Referee for iterated two-player games between programs
======================================================================

Drives two external player programs over a line protocol on their
standard input/output, scores each iteration by the rules of the
chosen game, and reports both final scores or the side that broke
the protocol.

Quick Start:
    from duel_referee import PrisonerDilemma, SubprocessActor, play_round

    with SubprocessActor.from_program("./left_bot") as left, \\
         SubprocessActor.from_program("./right_bot") as right:
        result = play_round(PrisonerDilemma(), left, right, iters=10)

    if result.ok:
        print(result.left_score, result.right_score)
    else:
        print(result.failed_side, result.error)

Testing a game without processes:
    from duel_referee import Actor
    class ScriptedActor(Actor): ...  # Implement ask() and say()

Built-in games
--------------
    dilemma       Iterated Prisoner's Dilemma (PrisonerDilemma)
    tug_of_war    Tug of War over a fixed energy budget (TugOfWar)
"""

from .actor import Actor
from ._actor.subprocess_actor import SubprocessActor, DEFAULT_TIMEOUT
from .config import DilemmaConfig, TugOfWarConfig, RefereeConfig, load_config
from .driver import play_round
from .games import (
    Game,
    Seat,
    Decision,
    PrisonerDilemma,
    TugOfWar,
    GAMES,
    build_game,
)
from .result import RoundResult, Side, Score
from .errors import (
    DuelRefereeError,
    ConfigError,
    ActorError,
    ProcessSpawnError,
    ScriptNotFoundError,
    ReadTimeoutError,
    UnexpectedEofError,
    WriteError,
    ProtocolViolationError,
    SideError,
)

__all__ = [
    # Actors
    "Actor",
    "SubprocessActor",
    "DEFAULT_TIMEOUT",
    # Configuration
    "DilemmaConfig",
    "TugOfWarConfig",
    "RefereeConfig",
    "load_config",
    # Games and driver
    "Game",
    "Seat",
    "Decision",
    "PrisonerDilemma",
    "TugOfWar",
    "GAMES",
    "build_game",
    "play_round",
    "RoundResult",
    "Side",
    "Score",
    # Errors
    "DuelRefereeError",
    "ConfigError",
    "ActorError",
    "ProcessSpawnError",
    "ScriptNotFoundError",
    "ReadTimeoutError",
    "UnexpectedEofError",
    "WriteError",
    "ProtocolViolationError",
    "SideError",
]
__version__ = "0.1.0"
