from __future__ import annotations

import hmac
from dataclasses import dataclass
from enum import Enum
from threading import Lock

import msgspec.structs

from .aggregate import aggregate, empty_stats
from .config import WrappedConfig
from .decoder import decode
from .event_log import log_event
from .records import WrappedStats
from .store import (
    AggregateStore,
    BlobStore,
    DirectoryBlobStore,
    RecordStore,
    SqlAggregateStore,
    SqlRecordStore,
    open_engine,
)

ERR_NO_SAVE_DATA = "ERR_NO_SAVE_DATA"
ERR_INVALID_SAVE = "ERR_INVALID_SAVE"
BACKUP_PREFIX = "saves/"
BACKUP_SUFFIX = ".sav"


class RefreshNotConfiguredError(RuntimeError):
    pass


class RefreshDeniedError(PermissionError):
    pass


class IngestStatus(Enum):
    INVALID = "invalid"
    DUPLICATE = "duplicate"
    ACCEPTED = "accepted"


@dataclass(frozen=True, slots=True)
class IngestResult:
    status: IngestStatus
    sha256_hash: str

    @property
    def response_text(self) -> str:
        if self.status is IngestStatus.INVALID:
            return ERR_INVALID_SAVE
        return self.sha256_hash


def backup_key(sha256_hash: str) -> str:
    return f"{BACKUP_PREFIX}{sha256_hash}{BACKUP_SUFFIX}"


class WrappedService:
    """Ingest uploads and keep the corpus snapshot current.

    Recomputations are serialized: each one reads the whole corpus and replaces
    the stored snapshot while holding `_recompute_lock`, so a slower, older
    recomputation can never overwrite a newer snapshot.
    """

    def __init__(
        self,
        records: RecordStore,
        aggregates: AggregateStore,
        *,
        blobs: BlobStore | None = None,
        refresh_secret: str | None = None,
    ) -> None:
        self.records = records
        self.aggregates = aggregates
        self.blobs = blobs
        self.refresh_secret = refresh_secret
        self._recompute_lock = Lock()

    @classmethod
    def from_config(cls, config: WrappedConfig) -> WrappedService:
        config.data_dir.mkdir(parents=True, exist_ok=True)
        engine = open_engine(config.resolved_database_url)
        return cls(
            SqlRecordStore(engine),
            SqlAggregateStore(engine),
            blobs=DirectoryBlobStore(config.resolved_backup_dir),
            refresh_secret=config.refresh_secret,
        )

    def ingest(self, raw: bytes) -> IngestResult:
        record = decode(raw)
        if not record.is_valid:
            log_event("ingest", sha256=record.sha256_hash, status=IngestStatus.INVALID.value)
            return IngestResult(IngestStatus.INVALID, record.sha256_hash)

        if self.records.find_by_hash(record.sha256_hash) is not None:
            log_event("ingest", sha256=record.sha256_hash, status=IngestStatus.DUPLICATE.value)
            return IngestResult(IngestStatus.DUPLICATE, record.sha256_hash)

        if self.blobs is not None:
            self.blobs.put(backup_key(record.sha256_hash), bytes(raw))
        if not self.records.insert_if_absent(record):
            # Lost a race with an identical upload.
            log_event("ingest", sha256=record.sha256_hash, status=IngestStatus.DUPLICATE.value)
            return IngestResult(IngestStatus.DUPLICATE, record.sha256_hash)

        log_event("ingest", sha256=record.sha256_hash, status=IngestStatus.ACCEPTED.value)
        self.recompute()
        return IngestResult(IngestStatus.ACCEPTED, record.sha256_hash)

    def recompute(self) -> WrappedStats:
        with self._recompute_lock:
            stats = aggregate(self.records.list_all())
            self.aggregates.replace_singleton(stats)
        log_event("recompute", submissions=stats.num_submissions)
        return stats

    def snapshot(self) -> WrappedStats:
        stats = self.aggregates.read_singleton()
        return stats if stats is not None else empty_stats()

    def snapshot_for(self, sha256_hash: str) -> WrappedStats | None:
        record = self.records.find_by_hash(sha256_hash)
        if record is None:
            return None
        return msgspec.structs.replace(self.snapshot(), save_data=record)

    def check_refresh_secret(self, secret: str) -> None:
        if not self.refresh_secret:
            raise RefreshNotConfiguredError("refresh secret is not configured")
        if not hmac.compare_digest(str(secret).strip().encode("utf-8"), self.refresh_secret.encode("utf-8")):
            raise RefreshDeniedError("refresh secret mismatch")

    def rebuild(self) -> int:
        """Wipe the record store and re-decode every backed-up save."""

        if self.blobs is None:
            raise RefreshNotConfiguredError("no backup store configured")
        with self._recompute_lock:
            self.records.delete_all()
            rebuilt = 0
            for key in self.blobs.list(BACKUP_PREFIX):
                record = decode(self.blobs.get(key))
                if not record.is_valid:
                    log_event("refresh_skipped", key=key, sha256=record.sha256_hash)
                    continue
                if self.records.insert_if_absent(record):
                    rebuilt += 1
            stats = aggregate(self.records.list_all())
            self.aggregates.replace_singleton(stats)
        log_event("refresh", rebuilt=rebuilt, submissions=stats.num_submissions)
        return rebuilt

    def refresh(self, secret: str) -> int:
        self.check_refresh_secret(secret)
        return self.rebuild()


__all__ = [
    "BACKUP_PREFIX",
    "ERR_INVALID_SAVE",
    "ERR_NO_SAVE_DATA",
    "IngestResult",
    "IngestStatus",
    "RefreshDeniedError",
    "RefreshNotConfiguredError",
    "WrappedService",
    "backup_key",
]
