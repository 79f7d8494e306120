from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import EMPLOYEES_PARTITION, ORGANIZERS_PARTITION, PASSPORT_BOXES_PARTITION
from ..entities.catalog import ENTITY_TYPES
from ..entities.model import EntityType, Record
from .boxes import PASSPORT_BOXES
from .employees import EMPLOYEES
from .organizers import ORGANIZERS


class SeedRegistry:
    """Read-only catalog of bundled reference records, per partition.

    Records are copied on the way in and on the way out, so nothing a caller
    does to a returned record can change the bundled data.
    """

    def __init__(
        self,
        seeds: Mapping[str, Sequence[Mapping[str, Any]]],
        *,
        entity_types: Mapping[str, EntityType] = ENTITY_TYPES,
    ):
        self._seeds = {partition: tuple(deepcopy(dict(r)) for r in rows) for partition, rows in seeds.items()}
        self._entity_types = entity_types

    @classmethod
    def bundled(cls) -> "SeedRegistry":
        return cls(
            {
                ORGANIZERS_PARTITION: ORGANIZERS,
                EMPLOYEES_PARTITION: EMPLOYEES,
                PASSPORT_BOXES_PARTITION: PASSPORT_BOXES,
            }
        )

    def list(self, partition: str) -> list[Record]:
        return [deepcopy(r) for r in self._seeds.get(partition, ())]

    def keys(self, partition: str) -> set[str]:
        rows = self._seeds.get(partition, ())
        if not rows:
            return set()
        entity_type = self._entity_types[partition]
        return {key for key in (entity_type.key_of(r) for r in rows) if key is not None}

    def get(self, partition: str, key: str) -> Optional[Record]:
        rows = self._seeds.get(partition, ())
        if not rows:
            return None
        entity_type = self._entity_types[partition]
        for r in rows:
            if entity_type.key_of(r) == key:
                return deepcopy(r)
        return None
