from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

Record = dict[str, Any]


@dataclass(frozen=True)
class EntityType:
    """Declaration of one reference entity kind.

    ``fields`` is the canonical field order (also the CSV header order) and
    ``business_key`` the single field used to match an overlay record with
    the seed record it overrides.
    """

    name: str
    partition: str
    fields: tuple[str, ...]
    business_key: str
    timestamp_fields: frozenset[str] = frozenset({"createdAt"})
    integer_fields: frozenset[str] = frozenset()
    float_fields: frozenset[str] = frozenset()
    boolean_fields: frozenset[str] = frozenset()
    list_fields: frozenset[str] = frozenset()
    image_field: Optional[str] = None

    def key_of(self, record: Mapping[str, Any]) -> Optional[str]:
        value = record.get(self.business_key)
        if value is None:
            return None
        text = str(value).strip()
        return text or None
