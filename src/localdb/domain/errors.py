"""Error taxonomy for localdb.

All failures surface to the caller as one of these exceptions:

    LocalDBError
    ├── StorageError                  I/O failure on the database document
    │   ├── DatabaseNotFoundError     attach() on a path that does not exist
    │   └── CorruptDocumentError      the document cannot be decoded
    └── SQLError
        ├── UnsupportedStatementError unrecognized leading keyword
        └── MalformedStatementError   structurally incomplete statement
"""

from __future__ import annotations


class LocalDBError(Exception):
    """Base class for every localdb error."""


class StorageError(LocalDBError):
    """Raised when the database document cannot be read or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DatabaseNotFoundError(StorageError):
    """Raised when attaching to a document that does not exist."""


class CorruptDocumentError(StorageError):
    """Raised when a document's contents are not a valid encoded database."""


class SQLError(LocalDBError):
    """Base class for statement errors.

    Attributes:
        statement: The offending statement text, when known.
    """

    def __init__(self, message: str, statement: str | None = None) -> None:
        super().__init__(message)
        self.statement = statement


class UnsupportedStatementError(SQLError):
    """Raised when a statement does not start with a supported keyword."""


class MalformedStatementError(SQLError):
    """Raised when a supported statement is missing required parts."""
