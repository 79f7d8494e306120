from __future__ import annotations

import logging
from datetime import datetime
from itertools import chain
from typing import Any, Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import generate_local_id
from ..common.timestamps import normalize_timestamp
from ..common.validators import require_mapping, require_non_empty
from ..core.exceptions import UnknownPartitionError
from ..entities.catalog import ENTITY_TYPES
from ..entities.model import EntityType, Record
from ..overlay.store import OverlayStore
from ..seeds.registry import SeedRegistry

logger = logging.getLogger(__name__)


def merge_records(
    entity_type: EntityType,
    seed_records: Iterable[Record],
    overlay_records: Iterable[Record],
) -> list[Record]:
    """Overlay wins over seed on a shared business key.

    Order: seed records in seed order, then overlay-only records in storage
    order. A later record with an already-seen key replaces the earlier one
    in place. Records without a key are kept as they come.
    """

    merged: list[Record] = []
    slot_by_key: dict[str, int] = {}
    for record in chain(seed_records, overlay_records):
        key = entity_type.key_of(record)
        if key is None:
            merged.append(record)
            continue
        slot = slot_by_key.get(key)
        if slot is None:
            slot_by_key[key] = len(merged)
            merged.append(record)
        else:
            merged[slot] = record
    return merged


class ReconciliationEngine:
    """Use case: read the merged view of a partition and write through the overlay."""

    def __init__(
        self,
        seeds: SeedRegistry,
        overlay: OverlayStore,
        *,
        entity_types: Mapping[str, EntityType] = ENTITY_TYPES,
        id_factory: Callable[[], str] = generate_local_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._seeds = seeds
        self._overlay = overlay
        self._entity_types = entity_types
        self._id_factory = id_factory
        self._clock = clock

    def entity_type(self, partition: str) -> EntityType:
        entity_type = self._entity_types.get(partition)
        if entity_type is None:
            raise UnknownPartitionError(f"Unknown partition: {partition}")
        return entity_type

    def partitions(self) -> list[str]:
        return list(self._entity_types)

    def get_all(self, partition: str) -> list[Record]:
        entity_type = self.entity_type(partition)
        return merge_records(entity_type, self._seeds.list(partition), self._overlay.load(partition))

    def get(self, partition: str, record_id: str) -> Optional[Record]:
        for record in self.get_all(partition):
            if str(record.get("id")) == str(record_id):
                return record
        return None

    def find_by_key(self, partition: str, key: str) -> Optional[Record]:
        entity_type = self.entity_type(partition)
        for record in self.get_all(partition):
            if entity_type.key_of(record) == key:
                return record
        return None

    def upsert(self, partition: str, record: Mapping[str, Any]) -> Record:
        """Insert or replace by business key, then persist the merged set.

        A record whose id matches an existing entry but whose key changed
        replaces that entry (an edit of the key itself).
        """

        entity_type = self.entity_type(partition)
        data: Record = dict(require_mapping(record))

        if entity_type.business_key == "id" and entity_type.key_of(data) is None:
            data["id"] = self._id_factory()
        key = require_non_empty(entity_type.key_of(data), entity_type.business_key)
        data[entity_type.business_key] = key

        merged = self.get_all(partition)
        slot = _find_slot(merged, lambda r: entity_type.key_of(r) == key)
        if slot is None and data.get("id"):
            slot = _find_slot(merged, lambda r: str(r.get("id")) == str(data["id"]))
        existing = merged[slot] if slot is not None else None

        if not data.get("id"):
            data["id"] = existing["id"] if existing and existing.get("id") else self._id_factory()

        for name in entity_type.timestamp_fields:
            value = data.get(name)
            if value is None or value == "":
                value = existing.get(name) if existing else None
            data[name] = normalize_timestamp(value if value is not None else self._clock())

        if slot is None:
            merged.append(data)
        else:
            merged[slot] = data

        self._overlay.save(partition, merged)
        logger.debug("Upserted %s %s (id=%s)", entity_type.name, key, data["id"])
        return data

    def delete(self, partition: str, record_id: str) -> bool:
        """Drop ``record_id`` from the merged set and persist the remainder.

        Records whose key also exists in the seed come back on the next read.
        """

        entity_type = self.entity_type(partition)
        merged = self.get_all(partition)
        removed = [r for r in merged if str(r.get("id")) == str(record_id)]
        if not removed:
            return False

        remaining = [r for r in merged if str(r.get("id")) != str(record_id)]
        seed_keys = self._seeds.keys(partition)
        for record in removed:
            if entity_type.key_of(record) in seed_keys:
                logger.info("%s %s is seed data; it will reappear on the next read", entity_type.name, record_id)
        self._overlay.save(partition, remaining)
        return True

    def replace_all(self, partition: str, records: Iterable[Mapping[str, Any]]) -> bool:
        self.entity_type(partition)
        return self._overlay.save_result(partition, records)


def _find_slot(records: list[Record], predicate: Callable[[Record], bool]) -> Optional[int]:
    for i, record in enumerate(records):
        if predicate(record):
            return i
    return None
