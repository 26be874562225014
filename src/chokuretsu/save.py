from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from construct import Array, Byte, Bytes, Int16ul, Int32sl, Padded, Padding, Struct, Terminated
from construct.core import ConstructError

SAVE_FILE_SIZE: Final[int] = 0x2000
SLOT_MAGIC: Final[bytes] = b"SAVE"

COMMON_SECTION_SIZE: Final[int] = 0x400
CHECKPOINT_SECTION_SIZE: Final[int] = 0x400
CHECKPOINT_SLOT_COUNT: Final[int] = 2
QUICK_SAVE_SECTION_SIZE: Final[int] = 0x1400

FLAGS_SIZE: Final[int] = 0x280
FLAG_COUNT: Final[int] = FLAGS_SIZE * 8
FOOTER_COUNT: Final[int] = 8


class SaveFormatError(ValueError):
    pass


SAVE_TIME_STRUCT = Struct(
    "year" / Int16ul,
    "month" / Byte,
    "day" / Byte,
    "hour" / Byte,
    "minute" / Byte,
    "second" / Byte,
    Padding(1),
)

SLOT_STRUCT = Struct(
    "magic" / Bytes(4),
    "save_time" / SAVE_TIME_STRUCT,
    "scenario_position" / Int16ul,
    "episode" / Byte,
    Padding(1),
    "flags" / Bytes(FLAGS_SIZE),
    "footer" / Array(FOOTER_COUNT, Int16ul),
    "haruhi_meter" / Int32sl,
)

SAVE_FILE_STRUCT = Struct(
    "common" / Bytes(COMMON_SECTION_SIZE),
    "checkpoints" / Array(CHECKPOINT_SLOT_COUNT, Padded(CHECKPOINT_SECTION_SIZE, SLOT_STRUCT)),
    "quick_save" / Padded(QUICK_SAVE_SECTION_SIZE, SLOT_STRUCT),
    Terminated,
)


@dataclass(frozen=True, slots=True)
class SaveSlot:
    save_time: dt.datetime
    scenario_position: int
    episode: int
    flags: bytes
    footer: tuple[int, ...]
    haruhi_meter: int

    def is_flag_set(self, flag: int) -> bool:
        index = int(flag)
        if index < 0 or index >= len(self.flags) * 8:
            raise IndexError(f"flag {index} out of range (0..{len(self.flags) * 8 - 1})")
        return (self.flags[index // 8] >> (index % 8)) & 1 == 1

    def set_flags(self, first: int = 0, last: int | None = None) -> list[int]:
        """Return the set flags in `first..last` (inclusive), in ascending order."""

        stop = len(self.flags) * 8 - 1 if last is None else int(last)
        return [flag for flag in range(int(first), stop + 1) if self.is_flag_set(flag)]


@dataclass(frozen=True, slots=True)
class SaveFile:
    checkpoint_slots: tuple[SaveSlot, ...]
    quick_save: SaveSlot | None = None


def _slot_from_raw(raw, *, section: str) -> SaveSlot | None:
    if bytes(raw["magic"]) != SLOT_MAGIC:
        return None
    stamp = raw["save_time"]
    try:
        save_time = dt.datetime(
            int(stamp["year"]),
            int(stamp["month"]),
            int(stamp["day"]),
            int(stamp["hour"]),
            int(stamp["minute"]),
            int(stamp["second"]),
        )
    except ValueError as exc:
        raise SaveFormatError(f"{section}: invalid save time: {exc}") from exc
    return SaveSlot(
        save_time=save_time,
        scenario_position=int(raw["scenario_position"]),
        episode=int(raw["episode"]),
        flags=bytes(raw["flags"]),
        footer=tuple(int(value) for value in raw["footer"]),
        haruhi_meter=int(raw["haruhi_meter"]),
    )


def parse_save(data: bytes) -> SaveFile:
    if len(data) != SAVE_FILE_SIZE:
        raise SaveFormatError(f"save data must be {SAVE_FILE_SIZE:#x} bytes, got {len(data):#x}")
    try:
        parsed = SAVE_FILE_STRUCT.parse(bytes(data))
    except ConstructError as exc:
        raise SaveFormatError(f"failed to parse save data: {exc}") from exc

    checkpoints: list[SaveSlot] = []
    for idx, raw in enumerate(parsed["checkpoints"]):
        slot = _slot_from_raw(raw, section=f"checkpoint {idx}")
        if slot is not None:
            checkpoints.append(slot)
    quick_save = _slot_from_raw(parsed["quick_save"], section="quick save")
    return SaveFile(checkpoint_slots=tuple(checkpoints), quick_save=quick_save)


def load_save(path: Path) -> SaveFile:
    return parse_save(path.read_bytes())


__all__ = [
    "CHECKPOINT_SLOT_COUNT",
    "COMMON_SECTION_SIZE",
    "FLAG_COUNT",
    "FLAGS_SIZE",
    "FOOTER_COUNT",
    "SAVE_FILE_SIZE",
    "SAVE_FILE_STRUCT",
    "SLOT_MAGIC",
    "SLOT_STRUCT",
    "SaveFile",
    "SaveFormatError",
    "SaveSlot",
    "load_save",
    "parse_save",
]
