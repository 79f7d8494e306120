from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import generate_local_id
from ..common.timestamps import normalize_timestamp
from ..entities.model import Record
from ..reconciliation.service import ReconciliationEngine
from .csv_codec import SkippedRow, decode_records, encode_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str
    mimetype: str = "text/csv"


@dataclass(frozen=True)
class ImportReport:
    """``records`` is the merged view followed by the appended rows."""

    records: list[Record] = field(default_factory=list)
    imported: int = 0
    skipped: list[SkippedRow] = field(default_factory=list)
    persisted: bool = True


def export_filename(partition: str, day: date) -> str:
    return f"{partition}_{day.isoformat()}.csv"


class RecordTransferService:
    """Use case: CSV export/import of a partition's merged view."""

    def __init__(
        self,
        engine: ReconciliationEngine,
        *,
        id_factory: Callable[[], str] = generate_local_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._engine = engine
        self._id_factory = id_factory
        self._clock = clock

    def export_csv(self, partition: str, *, today: Optional[date] = None) -> CsvExport:
        entity_type = self._engine.entity_type(partition)
        records = []
        for record in self._engine.get_all(partition):
            row = dict(record)
            for name in entity_type.timestamp_fields:
                if row.get(name) is not None:
                    row[name] = normalize_timestamp(row[name])
            records.append(row)

        content = encode_records(records, entity_type.fields)
        return CsvExport(filename=export_filename(partition, today or self._clock().date()), content=content)

    def import_csv(self, partition: str, text: str) -> ImportReport:
        """Append every accepted row to the merged view and persist it.

        Rows are inserted, not matched by business key: a row whose key is
        already present produces a second record in the returned view.
        """

        entity_type = self._engine.entity_type(partition)
        decoded = decode_records(text, entity_type, id_factory=self._id_factory, now=self._clock())
        combined = self._engine.get_all(partition) + decoded.records

        persisted = True
        if decoded.records:
            persisted = self._engine.replace_all(partition, combined)
        logger.info(
            "Imported %d %s record(s), skipped %d row(s)",
            len(decoded.records),
            entity_type.name,
            len(decoded.skipped),
        )
        return ImportReport(
            records=combined,
            imported=len(decoded.records),
            skipped=decoded.skipped,
            persisted=persisted,
        )
