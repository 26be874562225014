from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from wrapped.event_log import EventLog, close_event_log, event_log_path, format_event_line, init_event_log, log_event


def test_event_log_writes_events_to_file(tmp_path: Path) -> None:
    close_event_log()
    log_path = init_event_log(tmp_path / "logs" / "wrapped.log", host="127.0.0.1", port=8000)
    log_event("ingest", sha256="ABC", status="accepted")

    assert event_log_path() == log_path
    text = log_path.read_text(encoding="utf-8")
    assert "event=init" in text
    assert "host=127.0.0.1" in text
    assert "event=ingest" in text
    assert "status=accepted" in text

    close_event_log()
    assert event_log_path() is None


def test_log_event_without_init_is_a_noop(tmp_path: Path) -> None:
    close_event_log()
    log_event("ingest", sha256="ABC")

    assert event_log_path() is None
    assert list(tmp_path.iterdir()) == []


def test_event_logs_are_independent(tmp_path: Path) -> None:
    first = EventLog()
    second = EventLog()
    first.open(tmp_path / "first.log")
    first.write("recompute", submissions=3)

    second.write("recompute", submissions=4)

    assert second.path is None
    assert "submissions=3" in (tmp_path / "first.log").read_text(encoding="utf-8")
    first.close()
    assert first.path is None


def test_format_event_line_sorts_fields_and_quotes_awkward_values() -> None:
    now = dt.datetime(2024, 5, 1, 12, 0, 0, tzinfo=dt.timezone.utc)

    line = format_event_line(
        "decode_failed",
        {"z": 1, "error": "bad\nthing", "ok": True, "reason": "no completed slot", "empty": ""},
        now=now,
    )

    assert line == (
        '2024-05-01T12:00:00.000+00:00 event=decode_failed empty="" error="bad\\nthing" '
        'ok=true reason="no completed slot" z=1\n'
    )


def test_format_event_line_rejects_unknown_events() -> None:
    with pytest.raises(ValueError, match="unknown event"):
        format_event_line("upload", {})
