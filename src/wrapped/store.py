from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from threading import Lock
from typing import Protocol

from sqlalchemy import Column, Integer, MetaData, String, Table, Text, create_engine, delete, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from .records import DecodedRecord, WrappedStats, decode_record_json, decode_stats_json, encode_json

SAVE_COLLECTION_NAME = "choku_save"
STATS_COLLECTION_NAME = "choku_wrapped"
STATS_SINGLETON_ID = 0


class RecordStore(Protocol):
    def insert_if_absent(self, record: DecodedRecord) -> bool: ...

    def find_by_hash(self, sha256_hash: str) -> DecodedRecord | None: ...

    def list_all(self) -> list[DecodedRecord]: ...

    def delete_all(self) -> None: ...


class AggregateStore(Protocol):
    def replace_singleton(self, snapshot: WrappedStats) -> None: ...

    def read_singleton(self) -> WrappedStats | None: ...


class BlobStore(Protocol):
    def put(self, key: str, data: bytes) -> None: ...

    def list(self, prefix: str = "") -> list[str]: ...

    def get(self, key: str) -> bytes: ...


class MemoryRecordStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._records: dict[str, DecodedRecord] = {}

    def insert_if_absent(self, record: DecodedRecord) -> bool:
        with self._lock:
            if record.sha256_hash in self._records:
                return False
            self._records[record.sha256_hash] = record
            return True

    def find_by_hash(self, sha256_hash: str) -> DecodedRecord | None:
        with self._lock:
            return self._records.get(str(sha256_hash))

    def list_all(self) -> list[DecodedRecord]:
        with self._lock:
            return list(self._records.values())

    def delete_all(self) -> None:
        with self._lock:
            self._records.clear()


class MemoryAggregateStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._snapshot: WrappedStats | None = None

    def replace_singleton(self, snapshot: WrappedStats) -> None:
        with self._lock:
            self._snapshot = snapshot

    def read_singleton(self) -> WrappedStats | None:
        with self._lock:
            return self._snapshot


class MemoryBlobStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._blobs: dict[str, bytes] = {}

    def put(self, key: str, data: bytes) -> None:
        with self._lock:
            self._blobs[str(key)] = bytes(data)

    def list(self, prefix: str = "") -> list[str]:
        with self._lock:
            return sorted(key for key in self._blobs if key.startswith(prefix))

    def get(self, key: str) -> bytes:
        with self._lock:
            return self._blobs[str(key)]


_SEP_RE = re.compile(r"[\\/]+")


def _safe_relpath(key: str) -> Path:
    if key.startswith(("/", "\\")):
        raise ValueError(f"absolute blob key: {key!r}")
    parts = [p for p in _SEP_RE.split(key) if p]
    if not parts:
        raise ValueError("empty blob key")
    for part in parts:
        if part in (".", ".."):
            raise ValueError(f"unsafe blob key part: {part!r}")
    return Path(*parts)


class DirectoryBlobStore:
    """Blob store backed by plain files under `root`; keys are relative posix paths."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / _safe_relpath(str(key))

    def put(self, key: str, data: bytes) -> None:
        dest = self._path(key)
        dest.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            # One temp file per writer; concurrent puts of the same key each replace `dest` whole.
            with tempfile.NamedTemporaryFile(
                mode="wb",
                delete=False,
                dir=dest.parent,
                prefix=dest.name + ".",
                suffix=".tmp",
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(bytes(data))
                handle.flush()
                os.fsync(handle.fileno())
            tmp_path.replace(dest)
        finally:
            if tmp_path is not None:
                try:
                    tmp_path.unlink()
                except FileNotFoundError:
                    pass

    def list(self, prefix: str = "") -> list[str]:
        if not self.root.is_dir():
            return []
        keys: list[str] = []
        for path in self.root.rglob("*"):
            if not path.is_file() or path.name.endswith(".tmp"):
                continue
            key = path.relative_to(self.root).as_posix()
            if key.startswith(prefix):
                keys.append(key)
        return sorted(keys)

    def get(self, key: str) -> bytes:
        return self._path(key).read_bytes()


_METADATA = MetaData()

SAVE_TABLE = Table(
    SAVE_COLLECTION_NAME,
    _METADATA,
    Column("id", String(64), primary_key=True),
    Column("document", Text, nullable=False),
)

STATS_TABLE = Table(
    STATS_COLLECTION_NAME,
    _METADATA,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("document", Text, nullable=False),
)


def open_engine(database_url: str) -> Engine:
    engine = create_engine(database_url)
    _METADATA.create_all(engine)
    return engine


def _document(value: DecodedRecord | WrappedStats) -> str:
    return encode_json(value).decode("utf-8")


class SqlRecordStore:
    """Decoded records kept as JSON documents keyed by content hash."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def insert_if_absent(self, record: DecodedRecord) -> bool:
        try:
            with self.engine.begin() as conn:
                existing = conn.execute(select(SAVE_TABLE.c.id).where(SAVE_TABLE.c.id == record.sha256_hash)).first()
                if existing is not None:
                    return False
                conn.execute(insert(SAVE_TABLE).values(id=record.sha256_hash, document=_document(record)))
        except IntegrityError:
            return False
        return True

    def find_by_hash(self, sha256_hash: str) -> DecodedRecord | None:
        with self.engine.connect() as conn:
            row = conn.execute(select(SAVE_TABLE.c.document).where(SAVE_TABLE.c.id == str(sha256_hash))).first()
        if row is None:
            return None
        return decode_record_json(row[0])

    def list_all(self) -> list[DecodedRecord]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(SAVE_TABLE.c.document).order_by(SAVE_TABLE.c.id)).all()
        return [decode_record_json(row[0]) for row in rows]

    def delete_all(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(SAVE_TABLE))


class SqlAggregateStore:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def replace_singleton(self, snapshot: WrappedStats) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(STATS_TABLE))
            conn.execute(insert(STATS_TABLE).values(id=STATS_SINGLETON_ID, document=_document(snapshot)))

    def read_singleton(self) -> WrappedStats | None:
        with self.engine.connect() as conn:
            row = conn.execute(select(STATS_TABLE.c.document).where(STATS_TABLE.c.id == STATS_SINGLETON_ID)).first()
        if row is None:
            return None
        return decode_stats_json(row[0])


__all__ = [
    "AggregateStore",
    "BlobStore",
    "DirectoryBlobStore",
    "MemoryAggregateStore",
    "MemoryBlobStore",
    "MemoryRecordStore",
    "RecordStore",
    "SqlAggregateStore",
    "SqlRecordStore",
    "open_engine",
]
