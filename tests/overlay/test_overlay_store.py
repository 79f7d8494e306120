import json

import pytest

from src.hajj_dashboard.hajj_dashboard.core.constants import ORGANIZERS_PARTITION, PASSPORT_BOXES_PARTITION
from src.hajj_dashboard.hajj_dashboard.core.enums import LoadStatus
from src.hajj_dashboard.hajj_dashboard.core.exceptions import StorageError
from src.hajj_dashboard.hajj_dashboard.overlay.file_kv_store import FileKeyValueStore
from src.hajj_dashboard.hajj_dashboard.overlay.store import OverlayStore
from src.hajj_dashboard.hajj_dashboard.seeds.registry import SeedRegistry


def _store(kv):
    return OverlayStore(kv, SeedRegistry.bundled())


def test_empty_storage_loads_as_empty(kv_store):
    result = _store(kv_store).load_result(ORGANIZERS_PARTITION)

    assert result.records == []
    assert result.status == LoadStatus.EMPTY
    assert not result.failed


def test_corrupt_json_loads_as_empty(kv_store):
    kv_store.data[ORGANIZERS_PARTITION] = "{not json"
    store = _store(kv_store)

    assert store.load(ORGANIZERS_PARTITION) == []
    assert store.load_result(ORGANIZERS_PARTITION).status == LoadStatus.CORRUPT


def test_non_array_payload_loads_as_empty(kv_store):
    kv_store.data[ORGANIZERS_PARTITION] = json.dumps({"organizerNumber": "X"})

    result = _store(kv_store).load_result(ORGANIZERS_PARTITION)
    assert result.records == []
    assert result.status == LoadStatus.CORRUPT


def test_unavailable_storage_loads_as_empty(broken_kv_store):
    result = _store(broken_kv_store).load_result(ORGANIZERS_PARTITION)

    assert result.records == []
    assert result.status == LoadStatus.UNAVAILABLE
    assert result.failed


def test_non_object_entries_are_dropped(kv_store):
    kv_store.data[ORGANIZERS_PARTITION] = json.dumps([1, "x", {"id": "a", "organizerNumber": "ORG-9"}])

    records = _store(kv_store).load(ORGANIZERS_PARTITION)
    assert [r["id"] for r in records] == ["a"]


def test_legacy_timestamps_are_normalised_on_read(kv_store):
    kv_store.data[ORGANIZERS_PARTITION] = json.dumps(
        [{"id": "a", "organizerNumber": "ORG-9", "createdAt": {"seconds": 1700000000, "nanoseconds": 0}}]
    )

    record = _store(kv_store).load(ORGANIZERS_PARTITION)[0]
    assert record["createdAt"] == "2023-11-14T22:13:20.000Z"


def test_save_keeps_only_overlay_records(kv_store):
    store = _store(kv_store)
    seeds = SeedRegistry.bundled().list(ORGANIZERS_PARTITION)
    edited = dict(seeds[0], company="Renamed Co")
    new = {"id": "local_1", "organizerNumber": "ORG-100", "createdAt": {"seconds": 1700000000}}

    assert store.save_result(ORGANIZERS_PARTITION, [edited] + seeds[1:] + [new]) is True

    stored = json.loads(kv_store.data[ORGANIZERS_PARTITION])
    assert [r["organizerNumber"] for r in stored] == ["ORG-001", "ORG-100"]
    assert stored[0]["company"] == "Renamed Co"
    assert stored[1]["createdAt"] == "2023-11-14T22:13:20.000Z"


def test_unchanged_seed_with_null_fields_is_not_stored(kv_store):
    store = _store(kv_store)
    seeds = SeedRegistry.bundled().list(PASSPORT_BOXES_PARTITION)

    store.save(PASSPORT_BOXES_PARTITION, seeds)

    assert json.loads(kv_store.data[PASSPORT_BOXES_PARTITION]) == []


def test_save_failure_is_reported_not_raised(broken_kv_store):
    store = _store(broken_kv_store)

    assert store.save_result(ORGANIZERS_PARTITION, [{"id": "a", "organizerNumber": "ORG-9"}]) is False
    store.save(ORGANIZERS_PARTITION, [])


def test_remove_by_id(kv_store):
    store = _store(kv_store)
    store.save(ORGANIZERS_PARTITION, [{"id": "a", "organizerNumber": "ORG-8"}, {"id": "b", "organizerNumber": "ORG-9"}])

    assert store.remove(ORGANIZERS_PARTITION, "a") is True
    assert store.remove(ORGANIZERS_PARTITION, "missing") is False
    assert [r["id"] for r in store.load(ORGANIZERS_PARTITION)] == ["b"]


def test_file_store_round_trip(tmp_path):
    kv = FileKeyValueStore(tmp_path / "store")
    store = _store(kv)

    assert kv.get(ORGANIZERS_PARTITION) is None
    store.save(ORGANIZERS_PARTITION, [{"id": "a", "organizerNumber": "ORG-9", "company": "Zamzam Travel"}])

    assert (tmp_path / "store" / "organizers.json").exists()
    assert _store(FileKeyValueStore(tmp_path / "store")).load(ORGANIZERS_PARTITION)[0]["company"] == "Zamzam Travel"


def test_file_store_rejects_path_like_keys(tmp_path):
    kv = FileKeyValueStore(tmp_path)

    with pytest.raises(StorageError):
        kv.get("../escape")
    with pytest.raises(StorageError):
        kv.set(".hidden", "[]")
