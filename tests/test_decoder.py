from __future__ import annotations

import hashlib
import json
from pathlib import Path

from wrapped.decoder import decode, decode_file, meter_value, sha256_hex
from wrapped.event_log import init_event_log
from wrapped.records import encode_json
from wrapped.reference import UNKNOWN_LABEL
from wrapped.rules import EP1_MEMORY_CARD_ACTIONS, EP1_NO_ACTIVITY_GUESS


def test_decode_sample_playthrough(sample_save: bytes) -> None:
    record = decode(sample_save)

    assert record.is_valid
    assert record.sha256_hash == hashlib.sha256(sample_save).hexdigest().upper()
    assert record.has_friendship
    assert record.friendship_levels == (3, 0, 5, 0, 0)
    assert record.unlocked_ending == UNKNOWN_LABEL

    assert record.num_topics_obtained == 2
    assert [topic.name for topic in record.topics_obtained] == [
        "chokuretsu-wrapped-topic-memory-card",
        "chokuretsu-wrapped-topic-stray-cat",
    ]
    assert record.topics_obtained[1].episode == 3
    assert record.topics_obtained[1].type == "Main"

    assert len(record.routes_taken) == 1
    route = record.routes_taken[0]
    assert route.flag == 1025
    assert route.name == "chokuretsu-wrapped-ep1-working-with-koizumi"
    assert route.characters == ["chokuretsu-wrapped-koizumi"]
    assert route.objective == "A"
    assert route.side_characters == [
        "chokuretsu-wrapped-member-a",
        "chokuretsu-wrapped-president",
        "chokuretsu-wrapped-sister",
    ]
    assert record.routes_with_character == {
        "chokuretsu-wrapped-haruhi": 0,
        "chokuretsu-wrapped-mikuru": 0,
        "chokuretsu-wrapped-nagato": 0,
        "chokuretsu-wrapped-koizumi": 1,
    }
    assert record.routes_with_side_character["chokuretsu-wrapped-sister"] == 1
    assert record.routes_with_side_character["chokuretsu-wrapped-cat"] == 0

    assert record.haruhi_meter == 50
    assert record.saw_game_over_tutorial is False
    assert record.ep1_activity_guess == EP1_NO_ACTIVITY_GUESS
    assert record.num_comp_soc_members_interviewed == 0
    assert record.ep1_did_what_with_memory_card == EP1_MEMORY_CARD_ACTIONS[2]
    assert record.ep1_resolution == UNKNOWN_LABEL


def test_decode_rejects_unfinished_save(make_save, make_slot) -> None:
    blob = make_save(make_slot((122, 4379, 4380), completed=False))
    record = decode(blob)

    assert not record.is_valid
    assert record.sha256_hash == sha256_hex(blob)
    assert record.topics_obtained == []
    assert record.routes_taken == []
    assert record.routes_with_character == {}
    assert record.unlocked_ending == ""


def test_decode_never_raises_on_garbage() -> None:
    record = decode(b"not a save file")

    assert not record.is_valid
    assert record.sha256_hash == hashlib.sha256(b"not a save file").hexdigest().upper()


def test_decode_prefers_latest_completed_checkpoint(make_save, make_slot) -> None:
    older = make_slot((122,), saved_at=(2024, 1, 1, 0, 0, 0))
    newer = make_slot((123,), saved_at=(2024, 2, 1, 0, 0, 0))

    for first, second in ((older, newer), (newer, older)):
        record = decode(make_save(first, second))
        assert [topic.flag for topic in record.topics_obtained] == [123]


def test_decode_ignores_unfinished_newer_checkpoint(make_save, make_slot) -> None:
    finished = make_slot((122,), saved_at=(2024, 1, 1, 0, 0, 0))
    unfinished = make_slot((123,), completed=False, saved_at=(2025, 1, 1, 0, 0, 0))

    record = decode(make_save(unfinished, finished))

    assert record.is_valid
    assert [topic.flag for topic in record.topics_obtained] == [122]


def test_decode_tie_keeps_first_checkpoint(make_save, make_slot) -> None:
    record = decode(make_save(make_slot((122,)), make_slot((123,))))

    assert [topic.flag for topic in record.topics_obtained] == [122]


def test_decode_ignores_quick_save(make_save, make_slot) -> None:
    blob = make_save(quick_save=make_slot((122,), saved_at=(2030, 1, 1, 0, 0, 0)))

    assert not decode(blob).is_valid


def test_decode_without_friendship_patch(make_save, make_slot) -> None:
    record = decode(make_save(make_slot()))

    assert record.is_valid
    assert not record.has_friendship
    assert record.friendship_levels == (0, 0, 0, 0, 0)


def test_decode_takes_first_route_per_group(make_save, make_slot) -> None:
    record = decode(make_save(make_slot((1022, 1023, 1038))))

    assert [route.flag for route in record.routes_taken] == [1022, 1038]


def test_decode_skips_flags_in_topic_holes(make_save, make_slot) -> None:
    record = decode(make_save(make_slot((151, 152, 820))))

    assert [topic.flag for topic in record.topics_obtained] == [820]
    assert record.num_topics_obtained == 1


def test_decode_episode_one_facts(make_save, make_slot) -> None:
    flags = (1016, 1169, 1181, 1183, 1184, 1205, 1399, 4315)
    record = decode(make_save(make_slot(flags)))

    assert record.saw_game_over_tutorial is True
    assert record.ep1_activity_guess == "chokuretsu-wrapped-ep1-summer-camp"
    assert record.num_comp_soc_members_interviewed == 2
    assert record.ep1_did_what_with_memory_card == "chokuretsu-wrapped-ep1-returned-memory-card"
    assert record.ep1_resolution == "chokuretsu-wrapped-ep1-off-by-h2o-plates"
    assert record.unlocked_ending == "chokuretsu-wrapped-tsuruya"


def test_meter_value() -> None:
    assert meter_value(-1) == 0
    assert meter_value(0) == 10
    assert meter_value(9) == 100


def test_decode_file_and_failure_logging(tmp_path: Path, sample_save: bytes) -> None:
    log_path = init_event_log(tmp_path / "logs" / "events.log")
    save_path = tmp_path / "ok.sav"
    save_path.write_bytes(sample_save)

    assert decode_file(save_path).is_valid
    decode(b"\x01\x02")

    text = log_path.read_text(encoding="utf-8")
    assert "event=decode_failed" in text
    assert "SaveFormatError" in text


def test_decode_is_deterministic(sample_save: bytes) -> None:
    assert decode(sample_save) == decode(bytes(sample_save))


def test_record_json_carries_later_episode_fields_at_defaults(sample_save: bytes) -> None:
    payload = json.loads(encode_json(decode(sample_save)))

    assert payload["ep2FoundTheSecretNote"] is False
    assert payload["ep2Resolution"] == ""
    assert payload["ep3WhoWalkedYouHome"] == ""
    assert payload["ep3Resolution"] == ""
    assert payload["ep4AResolution"] == ""
    assert payload["ep4BResolution"] == ""
    assert payload["ep5ClearedChessPuzzle"] is False
    assert payload["ep5DefeatedHaruhiInChess"] is False
    assert payload["ep5WhoWokeYouUp"] is False
