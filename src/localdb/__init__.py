"""
localdb - a minimal embedded record store

Persists named collections of rows to a single JSON document and accepts a
tiny subset of SQL: CREATE TABLE, INSERT INTO and SELECT * FROM.
"""

__version__ = "0.1.0"

from localdb.application import ExecutionResult, LocalDB, StatementInterpreter, attach, initialize
from localdb.infrastructure.observability import configure_observability
from localdb.domain import (
    CorruptDocumentError,
    DatabaseNotFoundError,
    IdentifierValue,
    IntegerValue,
    LocalDBError,
    MalformedStatementError,
    SQLError,
    StorageError,
    TextValue,
    UnsupportedStatementError,
    ValueTag,
)

__all__ = [
    "__version__",
    "LocalDB",
    "initialize",
    "attach",
    "configure_observability",
    "StatementInterpreter",
    "ExecutionResult",
    "IntegerValue",
    "TextValue",
    "IdentifierValue",
    "ValueTag",
    "LocalDBError",
    "StorageError",
    "DatabaseNotFoundError",
    "CorruptDocumentError",
    "SQLError",
    "UnsupportedStatementError",
    "MalformedStatementError",
]
