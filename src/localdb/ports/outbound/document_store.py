"""Document Store port for whole-database persistence.

This outbound port defines the contract for storing the entire database as
one document. There is no page layer and no log: every mutation is a full
load-modify-save cycle, and the document on disk is the only source of truth.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from localdb.domain.values import Database


class DocumentStore(Protocol):
    """Protocol for loading and saving a whole database document.

    Thread Safety:
        None. Concurrent writers racing on the same location lose updates
        (the last save wins).
    """

    @abstractmethod
    def initialize(self, location: str | Path) -> None:
        """Create a new, empty database document at location.

        An existing document at location is overwritten.

        Raises:
            StorageError: If the location cannot be written.
        """
        ...

    @abstractmethod
    def attach(self, location: str | Path) -> None:
        """Check that a document exists at location.

        The contents are not read; validation is deferred to the first load.

        Raises:
            DatabaseNotFoundError: If nothing exists at location.
        """
        ...

    @abstractmethod
    def load(self, location: str | Path) -> Database:
        """Read and decode the whole document.

        Raises:
            StorageError: If the document cannot be read.
            CorruptDocumentError: If it cannot be decoded and the store is
                not configured to substitute an empty database.
        """
        ...

    @abstractmethod
    def save(self, location: str | Path, database: Database) -> None:
        """Encode the whole database and replace the document with it.

        Raises:
            StorageError: If the document cannot be written.
        """
        ...
