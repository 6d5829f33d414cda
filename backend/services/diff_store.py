"""
Diff Store - Key-value persistence for submitted diff records
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol

from pydantic import ValidationError

from models.diff import DiffRecord
from services.errors import StoreUnavailable


class DiffStore(Protocol):
    def put(self, record_id: str, record: DiffRecord) -> None: ...
    def get(self, record_id: str) -> Optional[DiffRecord]: ...


def _decode(record_id: str, payload: str | bytes) -> DiffRecord:
    try:
        return DiffRecord.model_validate_json(payload)
    except (ValidationError, UnicodeDecodeError) as e:
        raise StoreUnavailable(f"Corrupt record {record_id}") from e


class InMemoryDiffStore:
    """Process-local store keeping each record as its JSON payload"""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def put(self, record_id: str, record: DiffRecord) -> None:
        self._items[record_id] = record.model_dump_json()

    def get(self, record_id: str) -> Optional[DiffRecord]:
        payload = self._items.get(record_id)
        if payload is None:
            return None
        return _decode(record_id, payload)

    def __len__(self) -> int:
        return len(self._items)


class FileDiffStore:
    """One JSON document per record inside a directory"""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailable(f"Cannot create store directory {self._directory}: {e}") from e

    def _path(self, record_id: str) -> Path:
        return self._directory / f"{record_id}.json"

    def put(self, record_id: str, record: DiffRecord) -> None:
        try:
            with open(self._path(record_id), "w", encoding="utf-8") as f:
                f.write(record.model_dump_json())
        except OSError as e:
            raise StoreUnavailable(f"Failed to write record {record_id}: {e}") from e

    def get(self, record_id: str) -> Optional[DiffRecord]:
        path = self._path(record_id)
        if not path.exists():
            return None
        try:
            with open(path, "rb") as f:
                payload = f.read()
        except OSError as e:
            raise StoreUnavailable(f"Failed to read record {record_id}: {e}") from e
        return _decode(record_id, payload)


def get_diff_store(config: dict[str, Any]) -> DiffStore:
    """Build the store backend named in config["store"]"""
    store_cfg = config.get("store", {})
    backend = str(store_cfg.get("backend", "memory")).lower()

    if backend == "file":
        path = store_cfg.get("path")
        if not path:
            raise ValueError("store.path is required for the file backend")
        print(f"[DiffStore] Using file backend at {path}")
        return FileDiffStore(path)
    if backend != "memory":
        raise ValueError(f"Unknown store.backend: {backend}")

    print("[DiffStore] Using in-memory backend")
    return InMemoryDiffStore()
