"""Domain layer - values and errors shared by every other layer."""

from localdb.domain.errors import (
    CorruptDocumentError,
    DatabaseNotFoundError,
    LocalDBError,
    MalformedStatementError,
    SQLError,
    StorageError,
    UnsupportedStatementError,
)
from localdb.domain.values import (
    Collection,
    Database,
    IdentifierValue,
    IntegerValue,
    Row,
    TextValue,
    Value,
    ValueTag,
    decode_database,
    decode_row,
    decode_value,
    encode_database,
    encode_row,
    encode_value,
)

__all__ = [
    # Errors
    "LocalDBError",
    "StorageError",
    "DatabaseNotFoundError",
    "CorruptDocumentError",
    "SQLError",
    "UnsupportedStatementError",
    "MalformedStatementError",
    # Values
    "ValueTag",
    "Value",
    "IntegerValue",
    "TextValue",
    "IdentifierValue",
    "Row",
    "Collection",
    "Database",
    "encode_value",
    "decode_value",
    "encode_row",
    "decode_row",
    "encode_database",
    "decode_database",
]
