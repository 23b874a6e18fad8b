"""Statement interpreter.

Runs classified statements against the database document. Every statement
is independent with respect to the file:

    CREATE TABLE / INSERT:  load -> mutate -> save
    SELECT:                 load -> lookup

Nothing is cached between statements, so the document on disk is always the
state the next statement sees. A batch is not a transaction: when a
statement fails, the statements before it stay applied.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from localdb.adapters.inbound.statement_parser import (
    StatementType,
    classify,
    parse_create,
    parse_insert,
    parse_select,
    split_statements,
)
from localdb.domain.errors import UnsupportedStatementError
from localdb.domain.values import Collection, IdentifierValue, Row, TextValue
from localdb.infrastructure.logging import get_logger
from localdb.infrastructure.metrics import MetricsRegistry, get_metrics
from localdb.infrastructure.tracing import trace_span
from localdb.ports.outbound.document_store import DocumentStore


# Metrics label for statements rejected before dispatch
UNSUPPORTED_LABEL = "unsupported"


@dataclass
class ExecutionResult:
    """Result of one applied statement."""

    statement_type: StatementType
    table_name: str
    affected_rows: int = 0
    message: str = ""


class StatementInterpreter:
    """Executes statements against one database document.

    Example:
        >>> interpreter = StatementInterpreter("app.db", JsonDocumentStore())
        >>> results = interpreter.execute("CREATE TABLE users (id UUID, name TEXT);")
        >>> interpreter.retrieve("SELECT * FROM users;")
        []
    """

    def __init__(
        self,
        location: str | Path,
        store: DocumentStore,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._location = Path(location)
        self._store = store
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__, path=str(self._location))

        self._handlers: dict[StatementType, Callable[[str], ExecutionResult]] = {
            StatementType.CREATE_TABLE: self.handle_create,
            StatementType.INSERT: self.handle_insert,
        }

    @property
    def location(self) -> Path:
        return self._location

    def execute(self, statements_text: str) -> list[ExecutionResult]:
        """Execute a batch of ';'-separated statements in order.

        Only CREATE TABLE and INSERT are accepted here; SELECT goes through
        retrieve().

        Returns:
            One ExecutionResult per statement applied.

        Raises:
            UnsupportedStatementError: On the first unrecognized statement.
            MalformedStatementError: On the first incomplete statement.
            StorageError: If the document cannot be read or written.
        """
        results: list[ExecutionResult] = []
        for segment in split_statements(statements_text):
            try:
                statement_type = classify(segment)
                handler = self._handlers.get(statement_type)
                if handler is None:
                    raise UnsupportedStatementError(
                        f"Unsupported SQL: {segment}", statement=segment
                    )
            except UnsupportedStatementError as e:
                self._metrics.statements_total.labels(
                    statement_type=UNSUPPORTED_LABEL, status="error"
                ).inc()
                self._logger.warning(
                    "statement_failed",
                    statement_type=UNSUPPORTED_LABEL,
                    error=type(e).__name__,
                    detail=str(e),
                )
                raise
            results.append(handler(segment))
        return results

    def retrieve(self, statement_text: str) -> Collection:
        """Return every row of the collection named by a SELECT statement.

        The statement is not split on ';'. An unknown collection yields an
        empty list.
        """
        with self._observe(StatementType.SELECT):
            statement = parse_select(statement_text)
            database = self._store.load(self._location)
            rows = list(database.get(statement.table_name, []))

        self._logger.debug("rows_retrieved", table=statement.table_name, rows=len(rows))
        return rows

    def handle_create(self, segment: str) -> ExecutionResult:
        """Create an empty collection unless it already exists."""
        with self._observe(StatementType.CREATE_TABLE):
            statement = parse_create(segment)
            database = self._store.load(self._location)
            created = statement.table_name not in database
            if created:
                database[statement.table_name] = []
            self._store.save(self._location, database)

        self._logger.info("table_created", table=statement.table_name, existed=not created)
        message = "OK: table created" if created else "OK: table already exists"
        return ExecutionResult(StatementType.CREATE_TABLE, statement.table_name, message=message)

    def handle_insert(self, segment: str) -> ExecutionResult:
        """Append one (id, name) row, creating the collection if needed."""
        with self._observe(StatementType.INSERT):
            statement = parse_insert(segment)
            row: Row = {
                "id": IdentifierValue(statement.record_id),
                "name": TextValue(statement.name),
            }
            database = self._store.load(self._location)
            database.setdefault(statement.table_name, []).append(row)
            self._store.save(self._location, database)

        self._metrics.rows_inserted_total.inc()
        self._logger.info("row_inserted", table=statement.table_name)
        return ExecutionResult(
            StatementType.INSERT, statement.table_name, affected_rows=1, message="OK: 1 row inserted"
        )

    @contextmanager
    def _observe(self, statement_type: StatementType) -> Iterator[None]:
        """Time, count and trace one statement."""
        start = time.perf_counter()
        status = "success"
        with trace_span(f"localdb.{statement_type.value}", {"localdb.path": str(self._location)}):
            try:
                yield
            except Exception as e:
                status = "error"
                self._logger.warning(
                    "statement_failed",
                    statement_type=statement_type.value,
                    error=type(e).__name__,
                    detail=str(e),
                )
                raise
            finally:
                self._metrics.statements_total.labels(
                    statement_type=statement_type.value, status=status
                ).inc()
                self._metrics.statement_latency_seconds.labels(
                    statement_type=statement_type.value
                ).observe(time.perf_counter() - start)
