"""Required-field validation for write requests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def validate(record: Any, required_fields: Sequence[str]) -> list[str]:
    """Return one ``"<field> is required"`` message per missing field.

    A field is missing when the key is absent or its value is the empty
    string.  ``None``, ``False`` and ``0`` count as present, so a JSON
    ``null`` reaches storage (``party_id: null`` clears a party).  An empty
    list means the record is valid.  Never raises.
    """
    values: Mapping[str, Any] = record if isinstance(record, Mapping) else {}
    errors: list[str] = []
    for field in required_fields:
        if field not in values or values[field] == "":
            errors.append(f"{field} is required")
    return errors
