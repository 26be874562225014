from __future__ import annotations

import hashlib
from pathlib import Path

from chokuretsu.save import SaveSlot, parse_save

from .event_log import log_event
from .records import DecodedRecord, RouteRef, TopicRef
from .reference import (
    COMPLETION_FLAGS,
    ROUTE_GROUPS,
    TOPIC_FLAG_FIRST,
    TOPIC_FLAG_LAST,
    character_label,
    character_labels,
    side_character_label,
    side_character_labels,
    topic_by_flag,
)
from .rules import (
    ENDING_RULE,
    EP1_ACTIVITY_GUESS,
    EP1_COMP_SOC_INTERVIEWS,
    EP1_MEMORY_CARD,
    EP1_RESOLUTION,
    SAW_GAME_OVER_TUTORIAL,
)

FRIENDSHIP_FOOTER_COUNT = 5


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(bytes(data)).hexdigest().upper()


def is_completed(slot: SaveSlot) -> bool:
    return all(slot.is_flag_set(flag) for flag in COMPLETION_FLAGS)


def select_slot(slots: tuple[SaveSlot, ...] | list[SaveSlot]) -> SaveSlot | None:
    """Pick the most recently saved slot that finished the game."""

    best: SaveSlot | None = None
    for slot in slots:
        if not is_completed(slot):
            continue
        if best is None or slot.save_time > best.save_time:
            best = slot
    return best


def meter_value(raw_meter: int) -> int:
    return (int(raw_meter) + 1) * 10


def _extract(sha256_hash: str, slot: SaveSlot) -> DecodedRecord:
    # The game clears friendship levels on completion; only saves made with the
    # friendship patch keep them, so all zeros means "unknown", not "zero".
    levels = [int(value) for value in slot.footer[:FRIENDSHIP_FOOTER_COUNT]]
    if len(levels) < FRIENDSHIP_FOOTER_COUNT:
        raise IndexError(f"footer has {len(levels)} values, expected {FRIENDSHIP_FOOTER_COUNT}")
    has_friendship = any(level != 0 for level in levels)

    topics: list[TopicRef] = []
    for flag in slot.set_flags(TOPIC_FLAG_FIRST, TOPIC_FLAG_LAST):
        topic = topic_by_flag(flag)
        if topic is not None:
            topics.append(TopicRef.from_topic(topic))

    routes: list[RouteRef] = []
    with_character = {label: 0 for label in character_labels()}
    with_side_character = {label: 0 for label in side_character_labels()}
    for group in ROUTE_GROUPS:
        for route in group:
            if not slot.is_flag_set(route.flag):
                continue
            routes.append(RouteRef.from_route(route))
            for character in route.characters:
                with_character[character_label(character)] += 1
            for side_character in route.side_characters:
                with_side_character[side_character_label(side_character)] += 1
            break

    return DecodedRecord(
        sha256_hash=sha256_hash,
        is_valid=True,
        has_friendship=has_friendship,
        haruhi_friendship_level=levels[0],
        mikuru_friendship_level=levels[1],
        nagato_friendship_level=levels[2],
        koizumi_friendship_level=levels[3],
        tsuruya_friendship_level=levels[4],
        unlocked_ending=ENDING_RULE.evaluate(slot),
        num_topics_obtained=len(topics),
        topics_obtained=topics,
        routes_taken=routes,
        routes_with_character=with_character,
        routes_with_side_character=with_side_character,
        haruhi_meter=meter_value(slot.haruhi_meter),
        saw_game_over_tutorial=SAW_GAME_OVER_TUTORIAL.evaluate(slot),
        ep1_activity_guess=EP1_ACTIVITY_GUESS.evaluate(slot),
        num_comp_soc_members_interviewed=EP1_COMP_SOC_INTERVIEWS.evaluate(slot),
        ep1_did_what_with_memory_card=EP1_MEMORY_CARD.evaluate(slot),
        ep1_resolution=EP1_RESOLUTION.evaluate(slot),
    )


def decode(raw: bytes) -> DecodedRecord:
    """Decode an uploaded save into a record.

    Never raises: anything that goes wrong while reading the save yields an
    invalid record that still carries the content hash.
    """

    sha256_hash = sha256_hex(raw)
    try:
        save = parse_save(raw)
        slot = select_slot(save.checkpoint_slots)
        if slot is None:
            log_event("decode_rejected", sha256=sha256_hash, reason="no completed slot")
            return DecodedRecord(sha256_hash=sha256_hash, is_valid=False)
        return _extract(sha256_hash, slot)
    except Exception as exc:  # noqa: BLE001
        log_event("decode_failed", sha256=sha256_hash, error=f"{type(exc).__name__}: {exc}")
        return DecodedRecord(sha256_hash=sha256_hash, is_valid=False)


def decode_file(path: Path) -> DecodedRecord:
    return decode(Path(path).read_bytes())


__all__ = [
    "decode",
    "decode_file",
    "is_completed",
    "meter_value",
    "select_slot",
    "sha256_hex",
]
