from src.hajj_dashboard.hajj_dashboard.core.constants import (
    EMPLOYEES_PARTITION,
    ORGANIZERS_PARTITION,
    PASSPORT_BOXES_PARTITION,
)
from src.hajj_dashboard.hajj_dashboard.seeds.registry import SeedRegistry


def test_bundled_seed_contents():
    seeds = SeedRegistry.bundled()

    assert [r["organizerNumber"] for r in seeds.list(ORGANIZERS_PARTITION)] == ["ORG-001", "ORG-002", "ORG-003", "ORG-004"]
    assert [r["id"] for r in seeds.list(EMPLOYEES_PARTITION)] == ["emp-1", "emp-2", "emp-3"]
    assert len(seeds.list(PASSPORT_BOXES_PARTITION)) == 5


def test_unknown_partition_is_empty():
    seeds = SeedRegistry.bundled()

    assert seeds.list("nope") == []
    assert seeds.keys("nope") == set()
    assert seeds.get("nope", "x") is None


def test_returned_records_are_copies():
    seeds = SeedRegistry.bundled()

    first = seeds.list(ORGANIZERS_PARTITION)[0]
    first["company"] = "changed"
    seeds.get(ORGANIZERS_PARTITION, "ORG-002")["company"] = "changed"

    assert seeds.list(ORGANIZERS_PARTITION)[0]["company"] != "changed"
    assert seeds.get(ORGANIZERS_PARTITION, "ORG-002")["company"] != "changed"


def test_keys_and_get():
    seeds = SeedRegistry({ORGANIZERS_PARTITION: [{"id": "a", "organizerNumber": "K-1"}, {"id": "b"}]})

    assert seeds.keys(ORGANIZERS_PARTITION) == {"K-1"}
    assert seeds.get(ORGANIZERS_PARTITION, "K-1")["id"] == "a"
    assert seeds.get(ORGANIZERS_PARTITION, "K-2") is None
