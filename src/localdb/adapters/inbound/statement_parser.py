"""Keyword-driven statement parser.

This module recognizes a handful of literal statement shapes and extracts
their arguments by position. It is deliberately not a SQL grammar: each
statement is classified by its leading whitespace-delimited keywords, and
the pieces the interpreter needs are taken from fixed token positions.

Supported statements (keywords are case-sensitive):
    - CREATE TABLE <name> ( ... )
    - INSERT INTO <name> VALUES ( '<id>', '<name>' )   (INSET is accepted too)
    - SELECT * FROM <name>

Example:
    >>> parse_insert("INSERT INTO users VALUES ('1', 'kk')")
    InsertStatement(table_name='users', record_id='1', name='kk')
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from localdb.domain.errors import MalformedStatementError, UnsupportedStatementError


STATEMENT_SEPARATOR = ";"
QUOTE_CHARS = ("'", '"')

# Common misspelling of INSERT, rewritten before parsing
INSERT_MISSPELLING = "INSET"


class StatementType(Enum):
    """Types of supported statements."""

    CREATE_TABLE = "create_table"
    INSERT = "insert"
    SELECT = "select"


@dataclass(frozen=True)
class CreateTableStatement:
    """CREATE TABLE; the column list is accepted but not interpreted."""

    table_name: str

    @property
    def statement_type(self) -> StatementType:
        return StatementType.CREATE_TABLE


@dataclass(frozen=True)
class InsertStatement:
    """INSERT INTO with the fixed (id, name) value list."""

    table_name: str
    record_id: str
    name: str

    @property
    def statement_type(self) -> StatementType:
        return StatementType.INSERT


@dataclass(frozen=True)
class SelectStatement:
    """SELECT * FROM a single collection."""

    table_name: str

    @property
    def statement_type(self) -> StatementType:
        return StatementType.SELECT


# (leading keywords, statement type)
_KEYWORDS: tuple[tuple[tuple[str, ...], StatementType], ...] = (
    (("CREATE", "TABLE"), StatementType.CREATE_TABLE),
    (("INSERT", "INTO"), StatementType.INSERT),
    ((INSERT_MISSPELLING, "INTO"), StatementType.INSERT),
    (("SELECT",), StatementType.SELECT),
)


def split_statements(text: str) -> list[str]:
    """Split a batch on ';', trimming segments and dropping empty ones."""
    segments = (raw.strip() for raw in text.split(STATEMENT_SEPARATOR))
    return [segment for segment in segments if segment]


def join_lines(lines: Iterable[str]) -> str:
    """Join statement lines into one batch, each line newline-terminated."""
    return "".join(f"{line}\n" for line in lines)


def classify(segment: str) -> StatementType:
    """Classify a statement by its leading keywords.

    Raises:
        UnsupportedStatementError: If no supported keyword sequence matches.
    """
    tokens = segment.split()
    for keywords, statement_type in _KEYWORDS:
        if tuple(tokens[:len(keywords)]) == keywords:
            return statement_type
    raise UnsupportedStatementError(f"Unsupported SQL: {segment}", statement=segment)


def normalize_insert_keyword(segment: str) -> str:
    """Rewrite a leading INSET keyword to INSERT, leaving the rest untouched."""
    stripped = segment.lstrip()
    if stripped.split(maxsplit=1)[:1] == [INSERT_MISSPELLING]:
        return "INSERT" + stripped[len(INSERT_MISSPELLING):]
    return segment


def parse_create(segment: str) -> CreateTableStatement:
    """Extract the collection name (3rd token) from CREATE TABLE."""
    tokens = segment.split()
    if len(tokens) < 3:
        raise MalformedStatementError(
            f"CREATE TABLE requires table name: {segment}", statement=segment
        )
    return CreateTableStatement(table_name=tokens[2])


def parse_insert(segment: str) -> InsertStatement:
    """Extract the collection name and the two positional values from INSERT.

    The collection name is the 3rd token. The value list is the text between
    the first '(' and the first ')' after it, split on ','.

    Raises:
        MalformedStatementError: If the table name or value list is missing,
            or the value list does not hold exactly two values.
    """
    segment = normalize_insert_keyword(segment)
    tokens = segment.split()
    if len(tokens) < 3:
        raise MalformedStatementError(
            f"INSERT requires table name: {segment}", statement=segment
        )

    start = segment.find("(")
    end = segment.find(")", start + 1) if start != -1 else -1
    if start == -1 or end == -1:
        raise MalformedStatementError(
            f"INSERT requires a parenthesized value list: {segment}", statement=segment
        )

    args = [_strip_quotes(arg) for arg in segment[start + 1:end].split(",")]
    if len(args) != 2:
        raise MalformedStatementError(
            f"INSERT expects 2 values (id, name), got {len(args)}: {segment}",
            statement=segment,
        )

    return InsertStatement(table_name=tokens[2], record_id=args[0], name=args[1])


def parse_select(statement: str) -> SelectStatement:
    """Extract the collection name from SELECT * FROM <name>.

    Raises:
        UnsupportedStatementError: If the statement does not start with SELECT.
        MalformedStatementError: If the table token is missing or empty.
    """
    statement = statement.strip()
    tokens = statement.split()
    if tokens[:1] != ["SELECT"]:
        raise UnsupportedStatementError(
            f"Only SELECT is supported: {statement}", statement=statement
        )
    if len(tokens) < 4:
        raise MalformedStatementError(
            f"Invalid SELECT syntax: {statement}", statement=statement
        )

    table_name = tokens[3].replace(STATEMENT_SEPARATOR, "")
    if not table_name:
        raise MalformedStatementError(
            f"Invalid SELECT syntax: {statement}", statement=statement
        )
    return SelectStatement(table_name=table_name)


def _strip_quotes(arg: str) -> str:
    value = arg.strip()
    for quote in QUOTE_CHARS:
        value = value.replace(quote, "")
    return value
