"""Error formatting for structured round failure logs."""

from __future__ import annotations
import json
from typing import Any, Dict, Optional


def format_error_block(
    error_type: str,
    actor: str,
    side: Optional[str],
    detail: str,
    context: Optional[Dict[str, Any]],
) -> str:
    """Format a structured error block for a failed player."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " PLAYER ERROR — ROUND ABORTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Player:       {actor}",
    ]

    if side is not None:
        lines.append(f" Side:         {side}")

    lines.append(f" Detail:       {detail}")

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
