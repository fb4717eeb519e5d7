# ==============================================
# Insert Executor
# ==============================================
#
#   INSERT INTO <table> VALUES (<v1>, <v2>, ...)
#
#   Appends one row, pairing declared columns with values by
#   position. Every check runs before the append, so a rejected
#   statement never leaves a partial row behind.
#
# ==============================================

import logging

from ..errors import ArityError, TableNotFoundError
from ..parsing import parse_insert
from ..storage import Store


logger = logging.getLogger(__name__)


def execute_insert(raw: str, store: Store) -> str:
    """
    Run an INSERT statement against the store.

    Args:
        raw: Original-case statement text
        store: Store to mutate for this call only

    Returns:
        Success message for the console

    Raises:
        StatementSyntaxError: If the statement is malformed
        TableNotFoundError: If the table does not exist
        ArityError: If the value count differs from the column count
    """
    statement = parse_insert(raw)

    table = store.get(statement.table)
    if table is None:
        raise TableNotFoundError(statement.table, f"Table '{statement.table}' does not exist.")

    if len(statement.values) != len(table.columns):
        raise ArityError(expected=len(table.columns), actual=len(statement.values))

    table.append_row(statement.values)
    logger.debug("Table %r now has %d rows", table.name, len(table.rows))

    return f"Row inserted into table '{table.name}'"
