"""Inbound adapters for localdb.

Inbound adapters turn incoming statement text into typed statements the
application layer can act on.

Exports:
    - split_statements / join_lines: batch handling
    - classify: closed keyword classifier
    - parse_create / parse_insert / parse_select: argument extraction
"""

from localdb.adapters.inbound.statement_parser import (
    CreateTableStatement,
    InsertStatement,
    SelectStatement,
    StatementType,
    classify,
    join_lines,
    normalize_insert_keyword,
    parse_create,
    parse_insert,
    parse_select,
    split_statements,
)

__all__ = [
    "StatementType",
    "CreateTableStatement",
    "InsertStatement",
    "SelectStatement",
    "classify",
    "join_lines",
    "normalize_insert_keyword",
    "parse_create",
    "parse_insert",
    "parse_select",
    "split_statements",
]
