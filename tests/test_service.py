from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from threading import Barrier, Event, Lock, Thread

import pytest

from wrapped.config import WrappedConfig
from wrapped.decoder import sha256_hex
from wrapped.records import DecodedRecord, WrappedStats
from wrapped.service import (
    ERR_INVALID_SAVE,
    IngestStatus,
    RefreshDeniedError,
    RefreshNotConfiguredError,
    WrappedService,
    backup_key,
)
from wrapped.store import DirectoryBlobStore, MemoryAggregateStore, MemoryBlobStore, MemoryRecordStore


def _service(*, secret: str | None = "hunter2", blobs: MemoryBlobStore | None = None) -> WrappedService:
    return WrappedService(
        MemoryRecordStore(),
        MemoryAggregateStore(),
        blobs=blobs if blobs is not None else MemoryBlobStore(),
        refresh_secret=secret,
    )


def test_ingest_accepts_then_deduplicates(sample_save: bytes) -> None:
    service = _service()

    first = service.ingest(sample_save)
    second = service.ingest(sample_save)

    assert first.status is IngestStatus.ACCEPTED
    assert first.response_text == sha256_hex(sample_save)
    assert second.status is IngestStatus.DUPLICATE
    assert second.response_text == first.response_text
    assert service.snapshot().num_submissions == 1
    assert service.blobs.list() == [backup_key(first.sha256_hash)]


def test_ingest_rejects_invalid_save_without_storing(make_save, make_slot) -> None:
    service = _service()

    result = service.ingest(make_save(make_slot(completed=False)))

    assert result.status is IngestStatus.INVALID
    assert result.response_text == ERR_INVALID_SAVE
    assert service.records.list_all() == []
    assert service.blobs.list() == []
    assert service.snapshot().num_submissions == 0


def test_snapshot_before_any_upload_is_empty() -> None:
    assert _service().snapshot().num_submissions == 0


def test_snapshot_for_attaches_the_submitters_record(sample_save: bytes) -> None:
    service = _service()
    sha = service.ingest(sample_save).sha256_hash

    personal = service.snapshot_for(sha)

    assert personal is not None
    assert personal.save_data is not None
    assert personal.save_data.sha256_hash == sha
    assert personal.num_submissions == 1
    assert service.snapshot().save_data is None
    assert service.snapshot_for("0" * 64) is None


def test_refresh_rebuilds_from_backups(sample_save: bytes, make_save, make_slot) -> None:
    blobs = MemoryBlobStore()
    service = _service(blobs=blobs)
    service.ingest(sample_save)
    blobs.put(backup_key("broken"), b"garbage")
    service.records.delete_all()

    rebuilt = service.refresh("hunter2\n")

    assert rebuilt == 1
    assert len(service.records.list_all()) == 1
    assert service.snapshot().num_submissions == 1


def test_refresh_requires_matching_secret() -> None:
    with pytest.raises(RefreshDeniedError):
        _service().refresh("wrong")
    with pytest.raises(RefreshNotConfiguredError):
        _service(secret=None).refresh("anything")


def test_service_from_config_persists_to_disk(tmp_path: Path, sample_save: bytes) -> None:
    config = WrappedConfig(data_dir=tmp_path / "data")
    sha = WrappedService.from_config(config).ingest(sample_save).sha256_hash

    reopened = WrappedService.from_config(config)

    assert reopened.snapshot().num_submissions == 1
    assert reopened.snapshot_for(sha) is not None
    assert (config.resolved_backup_dir / backup_key(sha)).read_bytes() == sample_save


def test_concurrent_identical_uploads_return_the_same_hash(tmp_path: Path, sample_save: bytes) -> None:
    uploaders = 4

    for _ in range(10):
        service = WrappedService(
            MemoryRecordStore(),
            MemoryAggregateStore(),
            blobs=DirectoryBlobStore(tmp_path / "backup"),
        )
        barrier = Barrier(uploaders)

        def _upload(_idx: int):
            barrier.wait(timeout=5)
            return service.ingest(sample_save)

        with ThreadPoolExecutor(max_workers=uploaders) as pool:
            results = list(pool.map(_upload, range(uploaders)))

        assert {result.response_text for result in results} == {sha256_hex(sample_save)}
        assert [result.status for result in results].count(IngestStatus.ACCEPTED) == 1
        assert len(service.records.list_all()) == 1
        assert service.snapshot().num_submissions == 1


class _GatedRecordStore(MemoryRecordStore):
    """Blocks the first `list_all` until released, holding that caller mid-recompute."""

    def __init__(self) -> None:
        super().__init__()
        self.entered = Event()
        self.release = Event()
        self._gated = False

    def list_all(self) -> list[DecodedRecord]:
        records = super().list_all()
        if not self._gated:
            self._gated = True
            self.entered.set()
            self.release.wait(timeout=5)
        return records


class _OverlapTrackingAggregateStore(MemoryAggregateStore):
    def __init__(self) -> None:
        super().__init__()
        self._count_lock = Lock()
        self.active = 0
        self.max_active = 0
        self.writes: list[int] = []

    def replace_singleton(self, snapshot: WrappedStats) -> None:
        with self._count_lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(0.01)
        super().replace_singleton(snapshot)
        with self._count_lock:
            self.writes.append(snapshot.num_submissions)
            self.active -= 1


def test_older_recompute_never_overwrites_newer_snapshot(sample_save: bytes) -> None:
    records = _GatedRecordStore()
    aggregates = _OverlapTrackingAggregateStore()
    service = WrappedService(records, aggregates)

    # Reads the empty corpus, then stalls before publishing it.
    stale = Thread(target=service.recompute)
    stale.start()
    assert records.entered.wait(timeout=5)

    fresh = Thread(target=service.ingest, args=(sample_save,))
    fresh.start()
    deadline = time.monotonic() + 5
    while records.find_by_hash(sha256_hex(sample_save)) is None and time.monotonic() < deadline:
        time.sleep(0.005)
    time.sleep(0.05)

    records.release.set()
    stale.join(timeout=5)
    fresh.join(timeout=5)

    assert not stale.is_alive()
    assert not fresh.is_alive()
    assert aggregates.writes == [0, 1]
    assert aggregates.max_active == 1
    assert aggregates.read_singleton().num_submissions == 1
