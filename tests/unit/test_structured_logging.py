"""Unit tests for structured JSON event lines."""

from __future__ import annotations

import json

import pytest

from core.structured_logging import SERVICE_NAME, emit_json_event, render_event


@pytest.mark.unit
def test_emit_json_event_prints_one_parseable_line(capsys):
    line = emit_json_event("cli_resolve_completed", run_id="run-1", output_count=3)

    printed = capsys.readouterr().out
    assert printed == line + "\n"
    event = json.loads(line)
    assert event["event_type"] == "cli_resolve_completed"
    assert event["run_id"] == "run-1"
    assert event["level"] == "info"
    assert event["service"] == SERVICE_NAME
    assert event["output_count"] == 3
    assert event["timestamp"]


@pytest.mark.unit
def test_payload_cannot_override_standard_fields():
    event = json.loads(render_event("cli_error", "run-2", "error", {"run_id": "spoofed", "level": "info"}))

    assert event["run_id"] == "run-2"
    assert event["level"] == "error"


@pytest.mark.unit
def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        render_event("cli_error", None, "fatal", {})
