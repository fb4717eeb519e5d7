# ==============================================
# Tests for Lexer and Parser
# ==============================================

import pytest

from tableshell.errors import StatementSyntaxError
from tableshell.parsing import (
    CreateTable,
    DropTable,
    InsertRow,
    SelectRows,
    TokenType,
    parse_create,
    parse_drop,
    parse_insert,
    parse_select,
    tokenize,
)


class TestLexer:
    def test_token_types(self):
        tokens = tokenize("INSERT INTO t VALUES ('a, b', c);")
        assert [t.type for t in tokens] == [
            TokenType.WORD, TokenType.WORD, TokenType.WORD, TokenType.WORD,
            TokenType.LPAREN, TokenType.STRING, TokenType.COMMA, TokenType.WORD,
            TokenType.RPAREN, TokenType.SEMI, TokenType.EOF,
        ]

    def test_offsets(self):
        tokens = tokenize("  ab  cd")
        assert (tokens[0].start, tokens[0].end) == (2, 4)
        assert (tokens[1].start, tokens[1].end) == (6, 8)

    def test_escaped_quotes(self):
        assert tokenize("'O''Brien'")[0].value == "O'Brien"
        assert tokenize('"say ""hi"""')[0].value == 'say "hi"'

    def test_unterminated_string(self):
        with pytest.raises(StatementSyntaxError):
            tokenize("VALUES ('abc")

    def test_quote_inside_word_is_text(self):
        """Only a quote at the start of a token opens a string."""
        tokens = tokenize("O'Brien Bob's")
        assert [(t.type, t.value) for t in tokens[:2]] == [
            (TokenType.WORD, "O'Brien"),
            (TokenType.WORD, "Bob's"),
        ]

    def test_keyword_match_ignores_case(self):
        token = tokenize("From")[0]
        assert token.is_keyword("FROM")
        assert not tokenize("'from'")[0].is_keyword("from")


class TestCreate:
    def test_basic(self):
        assert parse_create("CREATE TABLE users (id, name)") == CreateTable("users", ["id", "name"])

    def test_no_space_before_paren(self):
        assert parse_create("create table users(id,name)") == CreateTable("users", ["id", "name"])

    def test_empty_columns_are_kept(self):
        assert parse_create("CREATE TABLE t (a, , b)").columns == ["a", "", "b"]
        assert parse_create("CREATE TABLE t ()").columns == [""]

    def test_multi_word_names_keep_spacing(self):
        statement = parse_create("CREATE TABLE my table (first  name, last name)")
        assert statement.name == "my table"
        assert statement.columns == ["first  name", "last name"]

    def test_trailing_semicolon(self):
        assert parse_create("CREATE TABLE t (a);").columns == ["a"]

    @pytest.mark.parametrize("line", [
        "CREATE users (id)",
        "CREATE TABLE",
        "CREATE TABLE users",
        "CREATE TABLE users (id, name",
        "CREATE TABLE (id)",
        "CREATE TABLE users (id) extra",
    ])
    def test_syntax_errors(self, line):
        with pytest.raises(StatementSyntaxError) as exc_info:
            parse_create(line)
        assert str(exc_info.value) == "Syntax error. Use: CREATE TABLE <name> (<columns>)"


class TestInsert:
    def test_basic(self):
        assert parse_insert("INSERT INTO users VALUES (1, Alice)") == InsertRow("users", ["1", "Alice"])

    def test_keywords_any_case(self):
        assert parse_insert("insert Into users values(1)").values == ["1"]

    def test_quoted_values_keep_commas_and_parens(self):
        statement = parse_insert("INSERT INTO t VALUES ('Smith, J (Jr)', '  padded ')")
        assert statement.values == ["Smith, J (Jr)", "  padded "]

    def test_bare_values_are_trimmed(self):
        assert parse_insert("INSERT INTO t VALUES (  John  Smith  , 3 )").values == ["John  Smith", "3"]

    def test_apostrophe_inside_bare_value(self):
        statement = parse_insert("INSERT INTO people VALUES (1, O'Brien, Bob's, 5\"6)")
        assert statement.values == ["1", "O'Brien", "Bob's", '5"6']

    def test_quoted_table_name_can_be_keyword(self):
        assert parse_insert("INSERT INTO 'values' VALUES (1)").table == "values"

    @pytest.mark.parametrize("line", [
        "INSERT users VALUES (1)",
        "INSERT INTO users (1)",
        "INSERT INTO users VALUES 1, 2",
        "INSERT INTO VALUES (1)",
        "INSERT INTO users VALUES (1, 2",
    ])
    def test_syntax_errors(self, line):
        with pytest.raises(StatementSyntaxError) as exc_info:
            parse_insert(line)
        assert exc_info.value.usage == "INSERT INTO <table> VALUES (...)"


class TestSelect:
    def test_star(self):
        statement = parse_select("SELECT * FROM users")
        assert statement == SelectRows("users", None)
        assert statement.select_all

    def test_column_list(self):
        assert parse_select("SELECT name, id FROM users").columns == ["name", "id"]

    def test_lowercase_from(self):
        assert parse_select("select name from users") == SelectRows("users", ["name"])

    def test_quoted_star_is_a_column_name(self):
        assert parse_select("SELECT '*' FROM t").columns == ["*"]

    def test_missing_columns_become_empty(self):
        assert parse_select("SELECT FROM t").columns == [""]

    @pytest.mark.parametrize("line", [
        "SELECT * users",
        "SELECT * FROM",
        "SELECTname FROM t",
        "SELECT a FROM t (x)",
    ])
    def test_syntax_errors(self, line):
        with pytest.raises(StatementSyntaxError) as exc_info:
            parse_select(line)
        assert str(exc_info.value) == "Syntax error. Use: SELECT <columns> FROM <table>"


class TestDrop:
    def test_basic(self):
        assert parse_drop("DROP TABLE users") == DropTable("users")

    def test_name_keeps_remainder(self):
        assert parse_drop("drop table my table") == DropTable("my table")

    @pytest.mark.parametrize("line", ["DROP users", "DROP TABLE", "DROP TABLE ;"])
    def test_syntax_errors(self, line):
        with pytest.raises(StatementSyntaxError) as exc_info:
            parse_drop(line)
        assert exc_info.value.usage == "DROP TABLE <table>"

