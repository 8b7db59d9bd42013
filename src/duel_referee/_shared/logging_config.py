# Area: Shared
"""
duel_referee._shared.logging_config — Structured logging setup
==============================================================

Configures dual logging: terminal (colored, on stderr) + optional
file (JSON lines). stdout is left alone because it carries the final
score line. Also provides the structured round failure report.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..result import RoundResult

# Package logger
logger = logging.getLogger("duel_referee")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    level: int = logging.WARNING,
    log_file_path: Optional[str] = None,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    level : int
        Logging level. Defaults to WARNING; verbose runs use DEBUG.
    log_file_path : str, optional
        Path to a JSON-lines log file. No file is written if omitted.
    """
    pkg_logger = logging.getLogger("duel_referee")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
            pkg_logger.setLevel(logging.DEBUG)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_round_failure(result: "RoundResult") -> None:
    """
    Report an aborted round in the structured format.

    Parameters
    ----------
    result : RoundResult
        An aborted result; completed results are ignored.
    """
    if result.ok or result.error is None:
        return

    # Print to terminal (bypassing logger for exact formatting)
    print(result.error.format_error_log(result.failed_side), file=sys.stderr)

    logger.error(
        f"Round error: {result.error.__class__.__name__}",
        extra={
            "side": result.failed_side.value if result.failed_side else None,
            "error_type": result.error.error_type,
        },
    )
