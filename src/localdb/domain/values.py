"""Typed scalar values and their JSON encoding.

Every row field holds one of a closed set of tagged values. The tag fully
determines how the payload is interpreted; there is no coercion between tags,
so ``IntegerValue(1)`` and ``TextValue("1")`` are never equal.

On disk a value is externally tagged, one key per object:

    {"INT": 42}
    {"TEXT": "kk"}
    {"UUID": "11111111-1111-1111-1111-111111111111"}

A row maps column names to encoded values, a collection is a JSON array of
rows, and the database is a JSON object mapping collection names to
collections.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from localdb.domain.errors import CorruptDocumentError


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueTag(Enum):
    """Tags of the value union, spelled as they appear on disk."""

    INT = "INT"
    TEXT = "TEXT"
    UUID = "UUID"


@dataclass(frozen=True, slots=True)
class IntegerValue:
    """A signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"IntegerValue requires an int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"IntegerValue out of 64-bit range: {self.value}")

    @property
    def tag(self) -> ValueTag:
        return ValueTag.INT

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class TextValue:
    """A text string."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"TextValue requires a str, got {type(self.value).__name__}")

    @property
    def tag(self) -> ValueTag:
        return ValueTag.TEXT

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IdentifierValue:
    """A UUID-like identifier token.

    The token is stored as given; it is not validated as a real UUID.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"IdentifierValue requires a str, got {type(self.value).__name__}")

    @property
    def tag(self) -> ValueTag:
        return ValueTag.UUID

    def __str__(self) -> str:
        return self.value


Value = Union[IntegerValue, TextValue, IdentifierValue]
Row = dict[str, Value]
Collection = list[Row]
Database = dict[str, Collection]


def encode_value(value: Value) -> dict[str, Any]:
    """Encode a value as a single-key tagged JSON object."""
    return {value.tag.value: value.value}


def decode_value(obj: Any) -> Value:
    """Decode a tagged JSON object into a value.

    Raises:
        CorruptDocumentError: If the object is not a single-key mapping, the
            tag is not one of INT/TEXT/UUID, or the payload type does not
            match the tag.
    """
    if not isinstance(obj, dict) or len(obj) != 1:
        raise CorruptDocumentError(f"Expected a single-key tagged value, got {obj!r}")

    (raw_tag, payload), = obj.items()
    try:
        tag = ValueTag(raw_tag)
    except ValueError as e:
        raise CorruptDocumentError(f"Unknown value tag: {raw_tag!r}") from e

    if tag is ValueTag.INT:
        # JSON true/false decode to bool, which is an int subclass
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise CorruptDocumentError(f"INT payload must be an integer, got {payload!r}")
        try:
            return IntegerValue(payload)
        except ValueError as e:
            raise CorruptDocumentError(str(e)) from e

    if not isinstance(payload, str):
        raise CorruptDocumentError(f"{tag.value} payload must be a string, got {payload!r}")
    if tag is ValueTag.TEXT:
        return TextValue(payload)
    return IdentifierValue(payload)


def encode_row(row: Row) -> dict[str, Any]:
    return {column: encode_value(value) for column, value in row.items()}


def decode_row(obj: Any) -> Row:
    if not isinstance(obj, dict):
        raise CorruptDocumentError(f"Row must be an object, got {type(obj).__name__}")
    return {column: decode_value(value) for column, value in obj.items()}


def encode_database(database: Database) -> dict[str, Any]:
    """Encode a whole database into JSON-compatible structures."""
    return {
        name: [encode_row(row) for row in rows]
        for name, rows in database.items()
    }


def decode_database(obj: Any) -> Database:
    """Decode a whole database, validating its shape.

    Raises:
        CorruptDocumentError: If any level of the document has the wrong shape.
    """
    if not isinstance(obj, dict):
        raise CorruptDocumentError(
            f"Database document must be an object, got {type(obj).__name__}"
        )

    database: Database = {}
    for name, rows in obj.items():
        if not isinstance(rows, list):
            raise CorruptDocumentError(f"Collection {name!r} must be an array")
        database[name] = [decode_row(row) for row in rows]
    return database
