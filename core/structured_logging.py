"""Structured JSON event lines for command-level observability."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

SERVICE_NAME = "contributor-resolver"

_LEVELS = frozenset({"debug", "info", "warning", "error"})


def render_event(event_type: str, run_id: str | None, level: str, payload: dict[str, Any]) -> str:
    """Render one event as a single sorted-key JSON line."""
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    event: dict[str, Any] = {
        **payload,
        "service": SERVICE_NAME,
        "event_type": event_type,
        "level": level,
        "run_id": run_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(event, ensure_ascii=True, sort_keys=True, default=str)


def emit_json_event(
    event_type: str,
    *,
    run_id: str | None,
    level: str = "info",
    **payload: Any,
) -> str:
    """Print one event line to stdout and return it for testability."""
    line = render_event(event_type, run_id, level, payload)
    print(line)
    return line
