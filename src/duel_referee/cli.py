# Area: Shared
"""
duel_referee.cli — Command-line interface
=========================================

Runs one round of a built-in game between two player programs.

Usage:
    duel-referee dilemma ./left_bot ./right_bot
    duel-referee tug_of_war ./left_bot ./right_bot -i 20 -v
    python -m duel_referee dilemma ./left_bot ./right_bot --config config.json

Output:
    success          "<left score> <right score>" on stdout, exit 0
    left failed      error on stderr, exit 1
    right failed     error on stderr, exit 2
    launch failure   error on stderr, exit 3
    bad config       error on stderr, exit 4
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import List, Optional

from ._actor.subprocess_actor import SubprocessActor
from ._shared.logging_config import setup_logging, log_round_failure
from .config import RefereeConfig, load_config
from .driver import play_round
from .errors import ConfigError, ActorError
from .games import GAMES, build_game
from .result import Side

logger = logging.getLogger("duel_referee")

EXIT_OK = 0
EXIT_LEFT_ERROR = 1
EXIT_RIGHT_ERROR = 2
IO_ERROR_CODE = 3
EXIT_CONFIG_ERROR = 4

SIDE_EXIT_CODES = {
    Side.LEFT: EXIT_LEFT_ERROR,
    Side.RIGHT: EXIT_RIGHT_ERROR,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duel-referee",
        description="Referee an iterated two-player game between two programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  duel-referee dilemma ./tit_for_tat ./always_defect
  duel-referee tug_of_war ./left ./right -i 20
  DUEL_REFEREE_TIMEOUT_MS=500 duel-referee dilemma ./a ./b -v
        """,
    )

    parser.add_argument("game", choices=sorted(GAMES), help="Game to play")
    parser.add_argument("program_left", help="Left player program")
    parser.add_argument("program_right", help="Right player program")

    parser.add_argument(
        "-i", "--iters",
        type=int,
        help="Number of runs of each program within the game (default: 10)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help="Time a player gets to answer, in milliseconds (default: 200)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write a JSON-lines log of the round to this file",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> RefereeConfig:
    """Load file/env configuration and apply command-line overrides."""
    config = load_config(args.config)

    overrides = {}
    if args.iters is not None:
        overrides["iters"] = args.iters
    if args.timeout_ms is not None:
        overrides["timeout_ms"] = args.timeout_ms
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.verbose:
        overrides["verbose"] = True

    if not overrides:
        return config
    try:
        return RefereeConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        raise ConfigError(f"Invalid command-line option: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        log_file_path=config.log_file,
    )

    game = build_game(args.game, config)

    with ExitStack() as stack:
        actors = {}
        for side, program in ((Side.LEFT, args.program_left),
                              (Side.RIGHT, args.program_right)):
            try:
                actor = SubprocessActor.from_program(
                    program, timeout=config.timeout_seconds, name=side.value,
                )
            except ActorError as e:
                print(f"failed to init {side.value} player: {e}", file=sys.stderr)
                return IO_ERROR_CODE
            actors[side] = stack.enter_context(actor)

        result = play_round(game, actors[Side.LEFT], actors[Side.RIGHT], config.iters)

    if result.ok:
        print(f"{result.left_score} {result.right_score}")
        return EXIT_OK

    if config.verbose:
        log_round_failure(result)
    print(result.error, file=sys.stderr)
    return SIDE_EXIT_CODES[result.failed_side]
