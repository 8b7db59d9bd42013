# Area: Shared
"""
Shared utilities.

This package contains:
- Logging configuration
- Structured round failure reporting
"""

from .logging_config import (
    setup_logging,
    log_round_failure,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_round_failure",
    "TerminalFormatter",
    "JSONFormatter",
]
