# ==============================================
# TOPIC 2: PARSING (Classify + tokenize + parse)
# ==============================================
#
# This package turns a raw console line into something an
# executor can act on.
#
# Modules:
# --------
# - classifier.py  → Line → tagged Statement (CREATE, SELECT, EXIT, ...)
# - lexer.py       → Line → tokens
# - parser.py      → Tokens → statement AST (recursive descent)
# - ast.py         → CreateTable, InsertRow, SelectRows, DropTable
#
# ==============================================

from .ast import CreateTable, DropTable, InsertRow, SelectRows, StatementNode
from .classifier import Statement, StatementKind, classify
from .lexer import Token, TokenType, tokenize
from .parser import USAGE, parse_create, parse_drop, parse_insert, parse_select

__all__ = [
    "CreateTable",
    "DropTable",
    "InsertRow",
    "SelectRows",
    "StatementNode",
    "Statement",
    "StatementKind",
    "classify",
    "Token",
    "TokenType",
    "tokenize",
    "USAGE",
    "parse_create",
    "parse_drop",
    "parse_insert",
    "parse_select",
]
