from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Ensure the local `src/` tree wins over any other editable install that may exist
    # (e.g. a different git worktree pointing at the same project).
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


COMPLETED_FLAGS = (4379, 4380, 4381, 4382, 4628)


def flag_bytes(flags: Iterable[int]) -> bytes:
    from chokuretsu.save import FLAGS_SIZE

    out = bytearray(FLAGS_SIZE)
    for flag in flags:
        out[int(flag) // 8] |= 1 << (int(flag) % 8)
    return bytes(out)


def slot_fields(
    flags: Iterable[int] = (),
    *,
    completed: bool = True,
    saved_at: tuple[int, int, int, int, int, int] = (2024, 1, 1, 12, 0, 0),
    footer: Iterable[int] = (),
    haruhi_meter: int = 0,
    episode: int = 5,
    scenario_position: int = 0,
) -> dict:
    all_flags = set(flags)
    if completed:
        all_flags.update(COMPLETED_FLAGS)
    footer_values = list(footer)[:8]
    footer_values += [0] * (8 - len(footer_values))
    year, month, day, hour, minute, second = saved_at
    return {
        "magic": b"SAVE",
        "save_time": {"year": year, "month": month, "day": day, "hour": hour, "minute": minute, "second": second},
        "scenario_position": scenario_position,
        "episode": episode,
        "flags": flag_bytes(all_flags),
        "footer": footer_values,
        "haruhi_meter": haruhi_meter,
    }


def empty_slot_fields() -> dict:
    fields = slot_fields(completed=False, saved_at=(0, 0, 0, 0, 0, 0))
    fields["magic"] = b"\x00" * 4
    return fields


def build_save_bytes(
    first: dict | None = None,
    second: dict | None = None,
    *,
    quick_save: dict | None = None,
) -> bytes:
    from chokuretsu.save import COMMON_SECTION_SIZE, SAVE_FILE_STRUCT

    return SAVE_FILE_STRUCT.build(
        {
            "common": bytes(COMMON_SECTION_SIZE),
            "checkpoints": [first or empty_slot_fields(), second or empty_slot_fields()],
            "quick_save": quick_save or empty_slot_fields(),
        }
    )


@pytest.fixture
def make_slot() -> Callable[..., dict]:
    return slot_fields


@pytest.fixture
def make_save() -> Callable[..., bytes]:
    return build_save_bytes


@pytest.fixture
def sample_save(make_save, make_slot) -> bytes:
    """A finished playthrough with friendship data, two topics and one episode 1 route."""

    return make_save(make_slot((122, 130, 1025), footer=(3, 0, 5, 0, 0), haruhi_meter=4))


@pytest.fixture(autouse=True)
def _reset_event_log():
    yield
    from wrapped.event_log import close_event_log

    close_event_log()
