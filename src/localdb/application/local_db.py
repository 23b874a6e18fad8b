"""LocalDB - library entry point.

Usage:
    from localdb import LocalDB

    db = LocalDB.initialize("app.db")
    db.execute(db.add_lines([
        "CREATE TABLE users (id UUID, name TEXT);",
        "INSERT INTO users VALUES ('11111111-1111-1111-1111-111111111111', 'kk');",
    ]))
    rows = db.retrieve("SELECT * FROM users;")

    # Later, from another call site
    db = LocalDB.attach("app.db")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from localdb.adapters.inbound.statement_parser import join_lines
from localdb.adapters.outbound.json_document_store import JsonDocumentStore
from localdb.application.interpreter import ExecutionResult, StatementInterpreter
from localdb.domain.values import Collection
from localdb.infrastructure.config import Config, get_config
from localdb.infrastructure.metrics import MetricsRegistry
from localdb.ports.outbound.document_store import DocumentStore


class LocalDB:
    """Handle on one database document.

    A handle only remembers the document path. Every execute() or retrieve()
    reads the document from disk again, so two handles on the same path see
    each other's writes (and can overwrite each other's; there is no
    locking).
    """

    def __init__(
        self,
        path: str | Path,
        store: DocumentStore | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Bind a handle without touching the file.

        Prefer initialize() or attach(), which also create or check the
        document.
        """
        self._path = Path(path)
        self._store = store or JsonDocumentStore(metrics=metrics)
        self._interpreter = StatementInterpreter(self._path, self._store, metrics=metrics)

    @classmethod
    def initialize(
        cls,
        path: str | Path,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> LocalDB:
        """Create a new empty database document at path.

        Raises:
            StorageError: If the file cannot be written.
        """
        store = JsonDocumentStore((config or get_config()).storage, metrics=metrics)
        store.initialize(path)
        return cls(path, store=store, metrics=metrics)

    @classmethod
    def attach(
        cls,
        path: str | Path,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> LocalDB:
        """Open an existing database document.

        Raises:
            DatabaseNotFoundError: If path does not exist.
        """
        store = JsonDocumentStore((config or get_config()).storage, metrics=metrics)
        store.attach(path)
        return cls(path, store=store, metrics=metrics)

    @property
    def path(self) -> Path:
        """Get the document path."""
        return self._path

    def execute(self, statements: str) -> list[ExecutionResult]:
        """Execute CREATE TABLE / INSERT statements separated by ';'."""
        return self._interpreter.execute(statements)

    def retrieve(self, statement: str) -> Collection:
        """Run a single SELECT * FROM <name> and return its rows."""
        return self._interpreter.retrieve(statement)

    @staticmethod
    def add_lines(lines: Iterable[str]) -> str:
        """Join statement lines into a single batch for execute()."""
        return join_lines(lines)

    def __repr__(self) -> str:
        return f"LocalDB(path={str(self._path)!r})"


def initialize(path: str | Path, config: Config | None = None) -> LocalDB:
    """Create a new empty database document and return a handle on it."""
    return LocalDB.initialize(path, config=config)


def attach(path: str | Path, config: Config | None = None) -> LocalDB:
    """Return a handle on an existing database document."""
    return LocalDB.attach(path, config=config)
