# ==============================================
# Create Executor
# ==============================================
#
#   CREATE TABLE <name> (<col1>, <col2>, ...)
#
#   Stores a new empty table under the exact name. An existing
#   table with that name is replaced and its rows are gone.
#
# ==============================================

import logging

from ..parsing import parse_create
from ..storage import Store, Table


logger = logging.getLogger(__name__)


def execute_create(raw: str, store: Store) -> str:
    """
    Run a CREATE TABLE statement against the store.

    Args:
        raw: Original-case statement text
        store: Store to mutate for this call only

    Returns:
        Success message for the console

    Raises:
        StatementSyntaxError: If the statement is malformed (store untouched)
    """
    statement = parse_create(raw)

    previous = store.put(Table(name=statement.name, columns=statement.columns))
    if previous is not None:
        logger.debug("Replaced table %r (%d rows discarded)", statement.name, len(previous.rows))

    return f"Table {statement.name} created!"
