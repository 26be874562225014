from __future__ import annotations

import datetime as dt
import os
from pathlib import Path
from threading import Lock

import msgspec

EVENTS: frozenset[str] = frozenset(
    {
        "init",
        "ingest",
        "recompute",
        "refresh",
        "refresh_skipped",
        "decode_failed",
        "decode_rejected",
    }
)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if text and not any(ch.isspace() or ch in '"=' for ch in text):
        return text
    return msgspec.json.encode(text).decode("utf-8")


def format_event_line(event: str, fields: dict[str, object], *, now: dt.datetime | None = None) -> str:
    """Render one `<iso time> event=<name> key=value ...` line, keys sorted.

    Values holding whitespace, quotes or `=` are written as JSON strings so a
    line always splits back into the same pairs.
    """

    if event not in EVENTS:
        raise ValueError(f"unknown event {event!r}")
    stamp = now if now is not None else dt.datetime.now(dt.timezone.utc)
    parts = [stamp.isoformat(timespec="milliseconds"), f"event={event}"]
    parts.extend(f"{key}={_format_value(fields[key])}" for key in sorted(fields))
    return " ".join(parts) + "\n"


class EventLog:
    """Append-only event file shared by every thread of the process; inert until opened."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        with self._lock:
            return self._path

    def open(self, path: Path, **fields: object) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            self._path = path
        self.write("init", pid=os.getpid(), **fields)
        return path

    def write(self, event: str, **fields: object) -> None:
        line = format_event_line(event, fields)
        with self._lock:
            if self._path is None:
                return
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line)

    def close(self) -> None:
        with self._lock:
            self._path = None


_EVENT_LOG = EventLog()


def event_log_path() -> Path | None:
    return _EVENT_LOG.path


def init_event_log(path: Path, **fields: object) -> Path:
    return _EVENT_LOG.open(path, **fields)


def log_event(event: str, **fields: object) -> None:
    _EVENT_LOG.write(event, **fields)


def close_event_log() -> None:
    _EVENT_LOG.close()


__all__ = [
    "EVENTS",
    "EventLog",
    "close_event_log",
    "event_log_path",
    "format_event_line",
    "init_event_log",
    "log_event",
]
