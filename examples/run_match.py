"""
run_match.py — Referee a match from Python
==========================================

Plays both built-in games between the example players and prints the
results. The same thing the CLI does, but with every step visible.

    python examples/run_match.py
"""

import logging
import sys
from pathlib import Path

from duel_referee import (
    PrisonerDilemma,
    SubprocessActor,
    TugOfWar,
    play_round,
)

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

PLAYERS = Path(__file__).parent / "players"

MATCHES = [
    (PrisonerDilemma(both_defect=1, betrayal_reward=10, both_cooperate=5),
     "tit_for_tat.py", "always_defect.py"),
    (TugOfWar(energy=100), "even_split.py", "all_in.py"),
]


def player(script: str, name: str) -> SubprocessActor:
    # Interpreter start-up can exceed the default 200 ms answer window.
    return SubprocessActor.from_script(sys.executable, PLAYERS / script,
                                       timeout=1.0, name=name)


for game, left_script, right_script in MATCHES:
    with player(left_script, "left") as left, player(right_script, "right") as right:
        result = play_round(game, left, right, iters=10)

    if result.ok:
        print(f"{game.name}: {left_script} {result.left_score} - "
              f"{result.right_score} {right_script}")
    else:
        print(f"{game.name}: {result.failed_side.value} player failed: {result.error}")
