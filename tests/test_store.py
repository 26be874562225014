from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from threading import Barrier

import pytest

from wrapped.aggregate import aggregate, empty_stats
from wrapped.decoder import decode
from wrapped.records import DecodedRecord
from wrapped.store import (
    DirectoryBlobStore,
    MemoryAggregateStore,
    MemoryBlobStore,
    MemoryRecordStore,
    SqlAggregateStore,
    SqlRecordStore,
    open_engine,
)


def _sql_stores(tmp_path: Path) -> tuple[SqlRecordStore, SqlAggregateStore]:
    engine = open_engine(f"sqlite:///{(tmp_path / 'wrapped.sqlite3').as_posix()}")
    return SqlRecordStore(engine), SqlAggregateStore(engine)


@pytest.fixture(params=["memory", "sql"])
def record_store(request, tmp_path: Path):
    if request.param == "memory":
        return MemoryRecordStore()
    return _sql_stores(tmp_path)[0]


@pytest.fixture(params=["memory", "sql"])
def aggregate_store(request, tmp_path: Path):
    if request.param == "memory":
        return MemoryAggregateStore()
    return _sql_stores(tmp_path)[1]


def test_record_store_inserts_each_hash_once(record_store, sample_save: bytes) -> None:
    record = decode(sample_save)

    assert record_store.insert_if_absent(record) is True
    assert record_store.insert_if_absent(record) is False
    assert record_store.find_by_hash(record.sha256_hash) == record
    assert record_store.find_by_hash("missing") is None
    assert record_store.list_all() == [record]

    record_store.delete_all()
    assert record_store.list_all() == []
    assert record_store.find_by_hash(record.sha256_hash) is None


def test_record_store_lists_every_record(record_store) -> None:
    for sha in ("BB", "AA", "CC"):
        record_store.insert_if_absent(DecodedRecord(sha256_hash=sha, is_valid=True))

    assert sorted(record.sha256_hash for record in record_store.list_all()) == ["AA", "BB", "CC"]


def test_aggregate_store_keeps_a_single_snapshot(aggregate_store, sample_save: bytes) -> None:
    assert aggregate_store.read_singleton() is None

    aggregate_store.replace_singleton(empty_stats())
    snapshot = aggregate([decode(sample_save)])
    aggregate_store.replace_singleton(snapshot)

    assert aggregate_store.read_singleton() == snapshot


def test_sql_stores_survive_reopening(tmp_path: Path, sample_save: bytes) -> None:
    records, aggregates = _sql_stores(tmp_path)
    record = decode(sample_save)
    records.insert_if_absent(record)
    aggregates.replace_singleton(aggregate([record]))

    reopened_records, reopened_aggregates = _sql_stores(tmp_path)

    assert reopened_records.find_by_hash(record.sha256_hash) == record
    snapshot = reopened_aggregates.read_singleton()
    assert snapshot is not None
    assert snapshot.num_submissions == 1


@pytest.mark.parametrize("kind", ["memory", "directory"])
def test_blob_store_put_list_get(kind: str, tmp_path: Path) -> None:
    store = MemoryBlobStore() if kind == "memory" else DirectoryBlobStore(tmp_path / "backup")

    assert store.list() == []
    store.put("saves/B.sav", b"b")
    store.put("saves/A.sav", b"a")
    store.put("other/C.sav", b"c")
    store.put("saves/A.sav", b"a2")

    assert store.list("saves/") == ["saves/A.sav", "saves/B.sav"]
    assert store.get("saves/A.sav") == b"a2"
    assert store.get("other/C.sav") == b"c"


@pytest.mark.parametrize("key", ["/etc/passwd", "../escape.sav", "saves/../../x", ""])
def test_directory_blob_store_rejects_unsafe_keys(tmp_path: Path, key: str) -> None:
    store = DirectoryBlobStore(tmp_path)

    with pytest.raises(ValueError):
        store.put(key, b"x")


def test_directory_blob_store_concurrent_puts_of_one_key(tmp_path: Path) -> None:
    store = DirectoryBlobStore(tmp_path / "backup")
    writers = 4

    for round_idx in range(25):
        barrier = Barrier(writers)
        payload = f"round {round_idx}".encode()

        def _put(_idx: int) -> None:
            barrier.wait(timeout=5)
            store.put("saves/SAME.sav", payload)

        with ThreadPoolExecutor(max_workers=writers) as pool:
            list(pool.map(_put, range(writers)))

        assert store.get("saves/SAME.sav") == payload

    assert store.list() == ["saves/SAME.sav"]
    assert [path.name for path in (tmp_path / "backup" / "saves").iterdir()] == ["SAME.sav"]
