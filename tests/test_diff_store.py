from __future__ import annotations

import json

import pytest

from models.diff import DiffRecord
from services.diff_store import FileDiffStore, InMemoryDiffStore, get_diff_store
from services.errors import StoreUnavailable
from services.identifiers import is_valid_id, new_id

RECORD = DiffRecord(oldText="a\nb\nc", newText="a\nx\nc")


def test_in_memory_store_round_trip():
    store = InMemoryDiffStore()
    record_id = new_id()
    store.put(record_id, RECORD)
    assert store.get(record_id) == RECORD
    assert store.get(new_id()) is None
    assert len(store) == 1


def test_file_store_round_trip(tmp_path):
    store = FileDiffStore(tmp_path / "diffs")
    record_id = new_id()
    store.put(record_id, RECORD)

    with open(tmp_path / "diffs" / f"{record_id}.json") as f:
        assert json.load(f) == {"oldText": "a\nb\nc", "newText": "a\nx\nc"}
    assert FileDiffStore(tmp_path / "diffs").get(record_id) == RECORD
    assert store.get(new_id()) is None


def test_file_store_corrupt_payload_is_unavailable(tmp_path):
    store = FileDiffStore(tmp_path)
    record_id = new_id()
    (tmp_path / f"{record_id}.json").write_text("{not json")
    with pytest.raises(StoreUnavailable):
        store.get(record_id)


def test_file_store_write_failure_is_unavailable(tmp_path):
    store = FileDiffStore(tmp_path / "diffs")
    record_id = new_id()
    # A directory where the record file should go makes open() fail
    (tmp_path / "diffs" / f"{record_id}.json").mkdir()
    with pytest.raises(StoreUnavailable):
        store.put(record_id, RECORD)


def test_record_is_immutable():
    with pytest.raises(Exception):
        RECORD.oldText = "changed"


def test_get_diff_store_backends(tmp_path):
    assert isinstance(get_diff_store({"store": {"backend": "memory"}}), InMemoryDiffStore)
    file_store = get_diff_store({"store": {"backend": "FILE", "path": str(tmp_path / "d")}})
    assert isinstance(file_store, FileDiffStore)
    with pytest.raises(ValueError):
        get_diff_store({"store": {"backend": "redis"}})
    with pytest.raises(ValueError):
        get_diff_store({"store": {"backend": "file"}})


def test_new_ids_are_unique_and_valid():
    ids = {new_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(is_valid_id(i) for i in ids)


@pytest.mark.parametrize(
    "value,valid",
    [
        ("3f2b8c1e-4a5d-4e6f-8a7b-9c0d1e2f3a4b", True),
        ("3F2B8C1E-4A5D-1E6F-BA7B-9C0D1E2F3A4B", True),
        ("3f2b8c1e-4a5d-6e6f-8a7b-9c0d1e2f3a4b", False),  # version 6
        ("3f2b8c1e-4a5d-4e6f-ca7b-9c0d1e2f3a4b", False),  # variant c
        ("3f2b8c1e4a5d4e6f8a7b9c0d1e2f3a4b", False),
        ("not-a-uuid", False),
        ("3f2b8c1e-4a5d-4e6f-8a7b-9c0d1e2f3a4b/extra", False),
        ("3f2b8c1e-4a5d-4e6f-8a7b-9c0d1e2f3a4b\n", False),
    ],
)
def test_is_valid_id(value, valid):
    assert is_valid_id(value) is valid


def test_file_store_invalid_utf8_is_unavailable(tmp_path):
    store = FileDiffStore(tmp_path)
    record_id = new_id()
    (tmp_path / f"{record_id}.json").write_bytes(b'{"oldText": "\xff", "newText": "x"}')
    with pytest.raises(StoreUnavailable):
        store.get(record_id)


def test_get_diff_store_error_names_config_key():
    with pytest.raises(ValueError, match="store.backend"):
        get_diff_store({"store": {"backend": "redis"}})
