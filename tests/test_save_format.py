from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from chokuretsu.save import FLAG_COUNT, SAVE_FILE_SIZE, SaveFormatError, load_save, parse_save


def test_parse_save_reads_populated_checkpoint_slots(make_save, make_slot) -> None:
    blob = make_save(make_slot((7, 1025), saved_at=(2024, 3, 9, 18, 30, 5), footer=(1, 2, 3, 4, 5), haruhi_meter=6))
    assert len(blob) == SAVE_FILE_SIZE

    save = parse_save(blob)

    assert len(save.checkpoint_slots) == 1
    slot = save.checkpoint_slots[0]
    assert slot.save_time == dt.datetime(2024, 3, 9, 18, 30, 5)
    assert slot.episode == 5
    assert slot.footer[:5] == (1, 2, 3, 4, 5)
    assert slot.haruhi_meter == 6
    assert slot.is_flag_set(7)
    assert slot.is_flag_set(1025)
    assert not slot.is_flag_set(8)
    assert save.quick_save is None


def test_parse_save_keeps_quick_save_out_of_checkpoints(make_save, make_slot) -> None:
    save = parse_save(make_save(quick_save=make_slot((42,))))

    assert save.checkpoint_slots == ()
    assert save.quick_save is not None
    assert save.quick_save.is_flag_set(42)


def test_set_flags_is_inclusive_and_ordered(make_save, make_slot) -> None:
    slot = parse_save(make_save(make_slot((122, 130, 820, 821), completed=False))).checkpoint_slots[0]

    assert slot.set_flags(122, 820) == [122, 130, 820]
    assert slot.set_flags(123, 129) == []


def test_is_flag_set_rejects_out_of_range_flags(make_save, make_slot) -> None:
    slot = parse_save(make_save(make_slot())).checkpoint_slots[0]

    with pytest.raises(IndexError):
        slot.is_flag_set(FLAG_COUNT)
    with pytest.raises(IndexError):
        slot.is_flag_set(-1)


@pytest.mark.parametrize("size", [0, SAVE_FILE_SIZE - 1, SAVE_FILE_SIZE + 1])
def test_parse_save_rejects_wrong_size(size: int) -> None:
    with pytest.raises(SaveFormatError):
        parse_save(b"\x00" * size)


def test_parse_save_rejects_impossible_save_time(make_save, make_slot) -> None:
    with pytest.raises(SaveFormatError, match="checkpoint 0"):
        parse_save(make_save(make_slot(saved_at=(2024, 13, 1, 0, 0, 0))))


def test_load_save_reads_from_disk(tmp_path: Path, sample_save: bytes) -> None:
    path = tmp_path / "chokuretsu.sav"
    path.write_bytes(sample_save)

    save = load_save(path)

    assert len(save.checkpoint_slots) == 1
    assert save.checkpoint_slots[0].set_flags(122, 820) == [122, 130]
