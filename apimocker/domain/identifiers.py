"""Record identifiers: the numeric/textual ``id`` kinds and lookups by id."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

ID_FIELD = "id"


@dataclass(frozen=True)
class NumericId:
    value: int | float

    def as_text(self) -> str:
        return repr(self.value) if isinstance(self.value, float) else str(self.value)


@dataclass(frozen=True)
class TextId:
    value: str

    def as_text(self) -> str:
        return self.value


Identifier = Union[NumericId, TextId]


class IdentifierCoercionError(ValueError):
    """Raised when a path id cannot take the kind of the stored id."""


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON keeps it apart from numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def identifier_of(record: Mapping[str, Any]) -> Optional[Identifier]:
    """Return the record's id as a NumericId/TextId, or None for any other kind."""
    if not isinstance(record, Mapping) or ID_FIELD not in record:
        return None
    value = record[ID_FIELD]
    if isinstance(value, str):
        return TextId(value)
    if _is_number(value):
        return NumericId(value)
    return None


def canonical_text(value: Any) -> str:
    """
    Textual form used to compare ids: strings as-is, numbers in decimal,
    anything else as compact JSON (``true``, ``null``).
    """
    if isinstance(value, str):
        return value
    if _is_number(value):
        return NumericId(value).as_text()
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def coerce_like(existing: Identifier, raw: str) -> Identifier:
    """Build an identifier from the path string with the same kind as ``existing``."""
    if isinstance(existing, TextId):
        return TextId(raw)
    if isinstance(existing, NumericId):
        try:
            return NumericId(int(raw.strip()))
        except ValueError as exc:
            raise IdentifierCoercionError(f"'{raw}' is not an integer id") from exc
    raise IdentifierCoercionError(f"unsupported identifier {existing!r}")


def find_index(collection: Sequence[Mapping[str, Any]], requested_id: str) -> Optional[int]:
    """Position of the first record whose id reads as ``requested_id``."""
    for idx, record in enumerate(collection):
        if not isinstance(record, Mapping) or ID_FIELD not in record:
            continue
        if canonical_text(record[ID_FIELD]) == requested_id:
            return idx
    return None
