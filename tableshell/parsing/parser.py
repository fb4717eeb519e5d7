# ==============================================
# Parser (recursive descent)
# ==============================================
#
# PURPOSE:
#   Turn the token list of one statement into a statement AST
#   node. Keywords match in any case; names and values keep
#   their original case.
#
# GRAMMAR:
# --------
#   create := CREATE TABLE item "(" item_list ")"
#   insert := INSERT INTO item VALUES "(" item_list ")"
#   select := SELECT ( "*" | item_list ) FROM item
#   drop   := DROP TABLE item
#
#   item      := STRING | WORD+          (bare words keep inner spacing)
#   item_list := [item] ( "," [item] )*  (missing items are "")
#
#   Each statement may end with one ";".
#
# ==============================================

from typing import Callable, Dict, List, Optional, Sequence

from ..errors import StatementSyntaxError
from .ast import CreateTable, DropTable, InsertRow, SelectRows, StatementNode
from .lexer import Token, TokenType, tokenize


USAGE: Dict[str, str] = {
    "create": "CREATE TABLE <name> (<columns>)",
    "insert": "INSERT INTO <table> VALUES (...)",
    "select": "SELECT <columns> FROM <table>",
    "drop": "DROP TABLE <table>",
}


class Parser:
    """Parses exactly one statement from one line of input."""

    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = tokenize(source)
        self.pos = 0

    # ── helpers ───────────────────────────────────────────────────────
    def _cur(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self._cur()
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def _eat(self, token_type: TokenType) -> Token:
        if self._cur().type is not token_type:
            raise StatementSyntaxError(f"expected '{token_type.value}', got {self._describe()}")
        return self._advance()

    def _eat_if(self, token_type: TokenType) -> bool:
        if self._cur().type is token_type:
            self._advance()
            return True
        return False

    def _eat_keyword(self, keyword: str) -> Token:
        if not self._cur().is_keyword(keyword):
            raise StatementSyntaxError(f"expected {keyword.upper()}, got {self._describe()}")
        return self._advance()

    def _describe(self) -> str:
        token = self._cur()
        if token.type is TokenType.EOF:
            return "end of line"
        return f"'{token.value}'"

    def _end(self) -> None:
        self._eat_if(TokenType.SEMI)
        if self._cur().type is not TokenType.EOF:
            raise StatementSyntaxError(f"unexpected {self._describe()} at end of statement")

    def _item(self, stop_keywords: Sequence[str] = ()) -> Optional[str]:
        token = self._cur()
        if token.type is TokenType.STRING:
            self._advance()
            return token.value

        first = last = None
        while self._cur().type is TokenType.WORD and not any(
            self._cur().is_keyword(keyword) for keyword in stop_keywords
        ):
            last = self._advance()
            if first is None:
                first = last
        if first is None:
            return None
        return self.source[first.start:last.end]

    def _item_list(self, stop_keywords: Sequence[str] = ()) -> List[str]:
        items = [self._item(stop_keywords) or ""]
        while self._eat_if(TokenType.COMMA):
            items.append(self._item(stop_keywords) or "")
        return items

    def _name(self, stop_keywords: Sequence[str] = ()) -> str:
        name = self._item(stop_keywords)
        if not name:
            raise StatementSyntaxError(f"expected a table name, got {self._describe()}")
        return name

    # ── statements ────────────────────────────────────────────────────
    def parse_create(self) -> CreateTable:
        self._eat_keyword("create")
        self._eat_keyword("table")
        name = self._name()
        self._eat(TokenType.LPAREN)
        columns = self._item_list()
        self._eat(TokenType.RPAREN)
        self._end()
        return CreateTable(name=name, columns=columns)

    def parse_insert(self) -> InsertRow:
        self._eat_keyword("insert")
        self._eat_keyword("into")
        table = self._name(stop_keywords=("values",))
        self._eat_keyword("values")
        self._eat(TokenType.LPAREN)
        values = self._item_list()
        self._eat(TokenType.RPAREN)
        self._end()
        return InsertRow(table=table, values=values)

    def parse_select(self) -> SelectRows:
        self._eat_keyword("select")
        columns: Optional[List[str]]
        if self._cur().is_keyword("*") and self.tokens[self.pos + 1].is_keyword("from"):
            self._advance()
            columns = None
        else:
            columns = self._item_list(stop_keywords=("from",))
        self._eat_keyword("from")
        table = self._name()
        self._end()
        return SelectRows(table=table, columns=columns)

    def parse_drop(self) -> DropTable:
        self._eat_keyword("drop")
        self._eat_keyword("table")
        name = self._name()
        self._end()
        return DropTable(name=name)


_ENTRY_POINTS: Dict[str, Callable[[Parser], StatementNode]] = {
    "create": Parser.parse_create,
    "insert": Parser.parse_insert,
    "select": Parser.parse_select,
    "drop": Parser.parse_drop,
}


def _parse_as(kind: str, source: str) -> StatementNode:
    try:
        return _ENTRY_POINTS[kind](Parser(source))
    except StatementSyntaxError as e:
        raise StatementSyntaxError(e.args[0], usage=USAGE[kind]) from e


def parse_create(source: str) -> CreateTable:
    return _parse_as("create", source)


def parse_insert(source: str) -> InsertRow:
    return _parse_as("insert", source)


def parse_select(source: str) -> SelectRows:
    return _parse_as("select", source)


def parse_drop(source: str) -> DropTable:
    return _parse_as("drop", source)

