# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   One exception per failure family. Executors raise them,
#   the shell catches TableShellError, prints the message and
#   keeps reading.
#
# TAXONOMY:
# ---------
# - StatementSyntaxError  → malformed statement shape
# - TableNotFoundError    → statement names a missing table
# - ColumnNotFoundError   → SELECT names a missing column
# - ArityError            → INSERT value count != column count
# - SnapshotError         → snapshot document does not match the schema
#
# ==============================================

from typing import Optional


class TableShellError(Exception):
    """Base class for every error reported back to the shell user."""


class StatementSyntaxError(TableShellError):
    """
    Raised when a statement does not match its grammar.

    Args:
        message: What went wrong while parsing
        usage: The usage line of the statement being parsed, if known
    """

    def __init__(self, message: str, usage: Optional[str] = None):
        super().__init__(message)
        self.usage = usage

    def __str__(self) -> str:
        if self.usage:
            return f"Syntax error. Use: {self.usage}"
        return f"Syntax error: {self.args[0]}"


class TableNotFoundError(TableShellError):
    """Raised when a statement refers to a table that is not in the store."""

    def __init__(self, table: str, message: Optional[str] = None):
        super().__init__(message or f"Table '{table}' not found")
        self.table = table


class ColumnNotFoundError(TableShellError):
    def __init__(self, column: str, table: str):
        super().__init__(f"Column '{column}' not found in table '{table}'")
        self.column = column
        self.table = table


class ArityError(TableShellError):
    def __init__(self, expected: int, actual: int):
        super().__init__("Column count does not match value count.")
        self.expected = expected
        self.actual = actual


class SnapshotError(TableShellError):
    """Raised while decoding a snapshot whose structure is not a valid store."""
