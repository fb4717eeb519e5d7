# ==============================================
# Select Executor
# ==============================================
#
#   SELECT <col1, col2, ...> FROM <table>
#   SELECT * FROM <table>
#
#   "*" projects every declared column in declared order.
#   An explicit list is validated up front: the first unknown
#   column aborts the whole statement, nothing is returned.
#   A row without a value for a projected column shows NULL.
#
# ==============================================

from typing import List

from ..errors import ColumnNotFoundError, TableNotFoundError
from ..parsing import parse_select
from ..storage import Store, Table
from .results import NULL, ResultSet


def _resolve_columns(table: Table, requested: List[str]) -> List[str]:
    for column in requested:
        if column not in table.columns:
            raise ColumnNotFoundError(column, table.name)
    return list(requested)


def execute_select(raw: str, store: Store) -> ResultSet:
    """
    Run a SELECT statement against the store (read-only).

    Args:
        raw: Original-case statement text
        store: Store to read for this call only

    Returns:
        ResultSet with the projected columns and rows

    Raises:
        StatementSyntaxError: If the statement is malformed
        TableNotFoundError: If the table does not exist
        ColumnNotFoundError: On the first requested column the table lacks
    """
    statement = parse_select(raw)

    table = store.get(statement.table)
    if table is None:
        raise TableNotFoundError(statement.table)

    if statement.select_all:
        columns = list(table.columns)
    else:
        columns = _resolve_columns(table, statement.columns)

    rows = [
        [row.get(column, NULL) for column in columns]
        for row in table.rows
    ]
    return ResultSet(table=table.name, columns=columns, rows=rows)
