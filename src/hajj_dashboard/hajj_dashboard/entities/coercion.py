from __future__ import annotations

import json
from typing import Any, Mapping

from ..core.constants import LIST_TEXT_SEPARATOR
from ..core.exceptions import ValidationError
from .model import EntityType, Record

_TRUE = {"true", "1", "yes", "y"}
_FALSE = {"false", "0", "no", "n"}


def coerce_text(entity_type: EntityType, field: str, text: str) -> Any:
    """Convert submitted/imported text into the field's declared type.

    Plain string fields are returned untouched; empty typed fields become None.
    """

    if field in entity_type.list_fields:
        return _coerce_list(field, text)

    typed = (
        entity_type.integer_fields
        | entity_type.float_fields
        | entity_type.boolean_fields
    )
    if field not in typed:
        return text

    value = text.strip()
    if not value:
        return None

    if field in entity_type.integer_fields:
        try:
            return int(value)
        except ValueError:
            try:
                number = float(value)
            except ValueError:
                raise ValidationError(f"{field} must be a whole number")
            if not number.is_integer():
                raise ValidationError(f"{field} must be a whole number")
            return int(number)

    if field in entity_type.float_fields:
        try:
            return float(value)
        except ValueError:
            raise ValidationError(f"{field} must be a number")

    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValidationError(f"{field} must be true or false")


def coerce_fields(entity_type: EntityType, values: Mapping[str, Any], *, only_known: bool = False) -> Record:
    """Coerce every string value of a submitted form; non-strings pass through."""

    out: Record = {}
    for field, value in values.items():
        if only_known and field not in entity_type.fields:
            continue
        out[field] = coerce_text(entity_type, field, value) if isinstance(value, str) else value
    return out



def _coerce_list(field: str, text: str) -> list[str]:
    # A JSON array cell is taken verbatim; anything else is ';'-separated text.
    value = text.strip()
    if value.startswith("["):
        try:
            items = json.loads(value)
        except ValueError:
            raise ValidationError(f"{field} must be a JSON array or ';'-separated text")
        return ["" if item is None else str(item) for item in items]
    return [part.strip() for part in value.split(LIST_TEXT_SEPARATOR) if part.strip()]
