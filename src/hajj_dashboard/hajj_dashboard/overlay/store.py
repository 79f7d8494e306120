from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from ..common.timestamps import normalize_timestamp
from ..core.enums import LoadStatus
from ..core.exceptions import StorageError, UnknownPartitionError
from ..entities.catalog import ENTITY_TYPES
from ..entities.model import EntityType, Record
from ..seeds.registry import SeedRegistry
from .repository import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """What ``OverlayStore.load_result`` found; ``records`` is always usable."""

    records: list[Record] = field(default_factory=list)
    status: LoadStatus = LoadStatus.EMPTY
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status in (LoadStatus.CORRUPT, LoadStatus.UNAVAILABLE)


class OverlayStore:
    """Durable overlay of user-authored records, one JSON array per partition.

    Persistence is best-effort: unreadable or malformed storage is treated as
    an empty overlay and write failures are logged, never raised.
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        seeds: SeedRegistry,
        *,
        entity_types: Mapping[str, EntityType] = ENTITY_TYPES,
    ):
        self._kv = kv_store
        self._seeds = seeds
        self._entity_types = entity_types

    def _entity_type(self, partition: str) -> EntityType:
        entity_type = self._entity_types.get(partition)
        if entity_type is None:
            raise UnknownPartitionError(f"Unknown partition: {partition}")
        return entity_type

    def load(self, partition: str) -> list[Record]:
        return self.load_result(partition).records

    def load_result(self, partition: str) -> LoadResult:
        entity_type = self._entity_type(partition)
        try:
            raw = self._kv.get(partition)
        except StorageError as e:
            logger.warning("Overlay %s unavailable, using empty overlay: %s", partition, e)
            return LoadResult(status=LoadStatus.UNAVAILABLE, error=str(e))

        if raw is None or not raw.strip():
            return LoadResult(status=LoadStatus.EMPTY)

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Overlay %s is not valid JSON, using empty overlay: %s", partition, e)
            return LoadResult(status=LoadStatus.CORRUPT, error=str(e))

        if not isinstance(data, list):
            logger.warning("Overlay %s is not a JSON array, using empty overlay", partition)
            return LoadResult(status=LoadStatus.CORRUPT, error="payload is not a JSON array")

        records: list[Record] = []
        for item in data:
            if not isinstance(item, dict):
                logger.warning("Dropping non-object entry from overlay %s: %r", partition, item)
                continue
            records.append(self._normalize_on_read(entity_type, item))
        return LoadResult(records=records, status=LoadStatus.OK)

    def save(self, partition: str, all_records: Iterable[Mapping[str, Any]]) -> None:
        self.save_result(partition, all_records)

    def save_result(self, partition: str, all_records: Iterable[Mapping[str, Any]]) -> bool:
        """Persist the overlay part of a full merged set.

        Entries identical to their seed record stay out of durable storage;
        everything else (new keys and edited seed keys) is written.
        """

        entity_type = self._entity_type(partition)
        to_store: list[Record] = []
        for record in all_records:
            key = entity_type.key_of(record)
            seed = self._seeds.get(partition, key) if key is not None else None
            if seed is not None and _comparable(self._normalize_on_read(entity_type, record)) == _comparable(
                self._normalize_on_read(entity_type, seed)
            ):
                continue
            to_store.append(self._prepare_for_write(entity_type, record))

        return self._write(partition, to_store)

    def remove(self, partition: str, record_id: str) -> bool:
        result = self.load_result(partition)
        if result.status != LoadStatus.OK:
            return False
        remaining = [r for r in result.records if str(r.get("id")) != str(record_id)]
        if len(remaining) == len(result.records):
            return False
        return self._write(partition, remaining)

    def _write(self, partition: str, records: list[Record]) -> bool:
        payload = json.dumps(records, ensure_ascii=False, default=str)
        try:
            self._kv.set(partition, payload)
        except StorageError as e:
            logger.warning("Could not persist overlay %s (%d records): %s", partition, len(records), e)
            return False
        return True

    @staticmethod
    def _normalize_on_read(entity_type: EntityType, item: Mapping[str, Any]) -> Record:
        record = dict(item)
        for name in entity_type.timestamp_fields:
            if record.get(name) is not None:
                record[name] = normalize_timestamp(record[name])
        return record

    @staticmethod
    def _prepare_for_write(entity_type: EntityType, item: Mapping[str, Any]) -> Record:
        record = dict(item)
        for name in entity_type.timestamp_fields:
            record[name] = normalize_timestamp(record.get(name))
        return record


def _comparable(record: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in record.items() if v is not None}
