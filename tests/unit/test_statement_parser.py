"""Unit tests for the keyword statement parser."""

from __future__ import annotations

import pytest

from localdb.adapters.inbound import (
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
from localdb.domain.errors import MalformedStatementError, UnsupportedStatementError


class TestSplitStatements:
    """Tests for batch splitting."""

    def test_split_and_trim(self) -> None:
        """Segments are trimmed and empty ones dropped."""
        text = "  CREATE TABLE a (x TEXT);\n\n INSERT INTO a VALUES ('1', 'n') ; ;  "
        assert split_statements(text) == [
            "CREATE TABLE a (x TEXT)",
            "INSERT INTO a VALUES ('1', 'n')",
        ]

    def test_empty_input(self) -> None:
        """Whitespace and separators alone yield no statements."""
        assert split_statements("") == []
        assert split_statements(" ;\n; ") == []

    def test_join_lines(self) -> None:
        """Each line is newline-terminated."""
        assert join_lines(["A;", "B;"]) == "A;\nB;\n"


class TestClassify:
    """Tests for the closed keyword classifier."""

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("CREATE TABLE users (id UUID)", StatementType.CREATE_TABLE),
            ("CREATE   TABLE users", StatementType.CREATE_TABLE),
            ("INSERT INTO users VALUES ('a', 'b')", StatementType.INSERT),
            ("INSET INTO users VALUES ('a', 'b')", StatementType.INSERT),
            ("SELECT * FROM users", StatementType.SELECT),
        ],
    )
    def test_supported(self, segment: str, expected: StatementType) -> None:
        """Leading keywords select the statement type."""
        assert classify(segment) == expected

    @pytest.mark.parametrize(
        "segment",
        [
            "DROP TABLE users",
            "create table users (id UUID)",
            "CREATE INDEX idx ON users (id)",
            "INSERT users VALUES ('a', 'b')",
            "UPDATE users SET name = 'x'",
        ],
    )
    def test_unsupported(self, segment: str) -> None:
        """Anything else is unsupported, and the error names the segment."""
        with pytest.raises(UnsupportedStatementError) as exc_info:
            classify(segment)

        assert exc_info.value.statement == segment
        assert segment in str(exc_info.value)


class TestNormalizeInsertKeyword:
    """Tests for INSET normalization."""

    def test_rewrites_leading_keyword(self) -> None:
        """A leading INSET becomes INSERT."""
        assert normalize_insert_keyword("INSET INTO t VALUES ('x', 'y')") == (
            "INSERT INTO t VALUES ('x', 'y')"
        )

    def test_values_untouched(self) -> None:
        """INSET inside values is left alone."""
        segment = "INSERT INTO t VALUES ('x', 'INSET')"
        assert normalize_insert_keyword(segment) == segment


class TestParseCreate:
    """Tests for CREATE TABLE extraction."""

    def test_table_name(self) -> None:
        """The third token is the table name; columns are ignored."""
        statement = parse_create("CREATE TABLE users (id UUID, name TEXT)")
        assert statement == CreateTableStatement(table_name="users")
        assert statement.statement_type == StatementType.CREATE_TABLE

    def test_no_column_list(self) -> None:
        """A column list is not required."""
        assert parse_create("CREATE TABLE things").table_name == "things"

    def test_missing_name(self) -> None:
        """CREATE TABLE without a name is malformed."""
        with pytest.raises(MalformedStatementError):
            parse_create("CREATE TABLE")


class TestParseInsert:
    """Tests for INSERT extraction."""

    def test_basic(self) -> None:
        """Table name and quoted values are extracted."""
        statement = parse_insert(
            "INSERT INTO users VALUES ('11111111-1111-1111-1111-111111111111', 'kk')"
        )
        assert statement == InsertStatement(
            table_name="users",
            record_id="11111111-1111-1111-1111-111111111111",
            name="kk",
        )
        assert statement.statement_type == StatementType.INSERT

    def test_misspelled_keyword(self) -> None:
        """INSET parses the same as INSERT."""
        assert parse_insert("INSET INTO t VALUES ('x','y')") == parse_insert(
            "INSERT INTO t VALUES ('x','y')"
        )

    def test_double_quotes_and_spacing(self) -> None:
        """Double quotes and surrounding whitespace are stripped."""
        statement = parse_insert('INSERT INTO t VALUES (  "a1" ,   "Bob"  )')
        assert (statement.record_id, statement.name) == ("a1", "Bob")

    def test_unquoted_values(self) -> None:
        """Values need not be quoted."""
        statement = parse_insert("INSERT INTO t VALUES (7, kk)")
        assert (statement.record_id, statement.name) == ("7", "kk")

    @pytest.mark.parametrize(
        "segment",
        [
            "INSERT INTO",
            "INSERT INTO t VALUES",
            "INSERT INTO t VALUES ('only-one')",
            "INSERT INTO t VALUES ('a', 'b', 'c')",
            "INSERT INTO t VALUES ('a', 'b'",
        ],
    )
    def test_malformed(self, segment: str) -> None:
        """Missing parts or a wrong value count are malformed, not crashes."""
        with pytest.raises(MalformedStatementError) as exc_info:
            parse_insert(segment)

        assert exc_info.value.statement is not None


class TestParseSelect:
    """Tests for SELECT extraction."""

    def test_table_name(self) -> None:
        """The fourth token, minus ';', is the table name."""
        statement = parse_select("SELECT * FROM users;")
        assert statement == SelectStatement(table_name="users")
        assert statement.statement_type == StatementType.SELECT

    def test_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert parse_select("  \n SELECT * FROM users  ").table_name == "users"

    def test_not_select(self) -> None:
        """Statements not starting with SELECT are unsupported."""
        with pytest.raises(UnsupportedStatementError, match="Only SELECT is supported"):
            parse_select("DELETE FROM users;")

    @pytest.mark.parametrize("statement", ["SELECT * FROM", "SELECT *", "SELECT", "SELECT * FROM ;"])
    def test_malformed(self, statement: str) -> None:
        """A missing or empty table token is malformed."""
        with pytest.raises(MalformedStatementError, match="Invalid SELECT syntax"):
            parse_select(statement)
