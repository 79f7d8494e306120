"""Delimited-text encoding of reference records.

Quoting follows RFC 4180: a field is wrapped in double quotes (inner quotes
doubled) only when it contains the delimiter, a quote, CR or LF. Parsing is a
single pass over the text with an in-quotes flag, so delimiters and line
breaks inside quoted fields never split a field or a row.

List fields are written as a JSON array in a single cell so items may contain
any character.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence

from ..common.datetime_utils import to_iso_utc
from ..common.ids import generate_local_id
from ..common.timestamps import normalize_timestamp
from ..core.constants import CSV_DELIMITER, CSV_LINE_TERMINATOR, CSV_QUOTE
from ..core.exceptions import ValidationError
from ..entities.coercion import coerce_text
from ..entities.model import EntityType, Record

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


@dataclass(frozen=True)
class SkippedRow:
    line: int
    reason: str


@dataclass(frozen=True)
class DecodeResult:
    records: list[Record] = field(default_factory=list)
    skipped: list[SkippedRow] = field(default_factory=list)


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return to_iso_utc(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return json.dumps([format_value(v) for v in value], ensure_ascii=False)
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def quote_field(text: str, delimiter: str = CSV_DELIMITER) -> str:
    if delimiter in text or CSV_QUOTE in text or "\n" in text or "\r" in text:
        return CSV_QUOTE + text.replace(CSV_QUOTE, CSV_QUOTE * 2) + CSV_QUOTE
    return text


def encode_records(
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str],
    *,
    delimiter: str = CSV_DELIMITER,
    line_terminator: str = CSV_LINE_TERMINATOR,
) -> str:
    lines = [delimiter.join(quote_field(name, delimiter) for name in fields)]
    for record in records:
        lines.append(delimiter.join(quote_field(format_value(record.get(name)), delimiter) for name in fields))
    return line_terminator.join(lines) + line_terminator


def iter_rows(text: str, *, delimiter: str = CSV_DELIMITER) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, fields)`` for every non-blank row."""

    row: list[str] = []
    buf: list[str] = []
    in_quotes = False
    line = 1
    row_line = 1
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if in_quotes:
            if ch == CSV_QUOTE:
                if i + 1 < n and text[i + 1] == CSV_QUOTE:
                    buf.append(CSV_QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                if ch == "\n":
                    line += 1
                buf.append(ch)
            i += 1
            continue

        if ch == CSV_QUOTE:
            in_quotes = True
        elif ch == delimiter:
            row.append("".join(buf))
            buf.clear()
        elif ch in "\r\n":
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            row.append("".join(buf))
            buf.clear()
            if row != [""]:
                yield row_line, row
            row = []
            line += 1
            row_line = line
        else:
            buf.append(ch)
        i += 1

    if buf or row:
        row.append("".join(buf))
        yield row_line, row


def normalize_header(text: str) -> str:
    return "".join(ch for ch in text.lower() if not ch.isspace() and ch not in "_-")


def decode_records(
    text: str,
    entity_type: EntityType,
    *,
    delimiter: str = CSV_DELIMITER,
    id_factory: Callable[[], str] = generate_local_id,
    now: Optional[datetime] = None,
) -> DecodeResult:
    """Parse CSV text into new records of ``entity_type``.

    Rows with the wrong number of fields, or whose values cannot be coerced,
    are skipped and reported; the rest of the file is still read. Every
    accepted record gets a fresh id, whatever the file says.
    """

    rows = iter_rows(text.lstrip(_BOM), delimiter=delimiter)
    header = next(rows, None)
    if header is None:
        return DecodeResult()

    _, header_cells = header
    by_normalized = {normalize_header(name): name for name in entity_type.fields}
    columns = [by_normalized.get(normalize_header(cell)) for cell in header_cells]

    result = DecodeResult()
    for line, cells in rows:
        if len(cells) != len(header_cells):
            reason = f"expected {len(header_cells)} fields, got {len(cells)}"
            logger.info("Skipping CSV line %d: %s", line, reason)
            result.skipped.append(SkippedRow(line=line, reason=reason))
            continue

        raw = {name: cell for name, cell in zip(columns, cells) if name is not None}
        try:
            record = _build_record(entity_type, raw, id_factory=id_factory, now=now)
        except ValidationError as e:
            logger.info("Skipping CSV line %d: %s", line, e)
            result.skipped.append(SkippedRow(line=line, reason=str(e)))
            continue
        result.records.append(record)

    return result


def _build_record(
    entity_type: EntityType,
    raw: Mapping[str, str],
    *,
    id_factory: Callable[[], str],
    now: Optional[datetime],
) -> Record:
    record: Record = {"id": id_factory()}
    for name in entity_type.fields:
        if name == "id" or name not in raw:
            continue
        if name in entity_type.timestamp_fields:
            record[name] = normalize_timestamp(raw[name].strip() or None, now=now)
        else:
            value = coerce_text(entity_type, name, raw[name])
            # empty text cells stay absent
            if value != "":
                record[name] = value

    for name in entity_type.timestamp_fields:
        if name not in record:
            record[name] = normalize_timestamp(None, now=now)

    if entity_type.key_of(record) is None:
        raise ValidationError(f"{entity_type.business_key} is required")
    return record
