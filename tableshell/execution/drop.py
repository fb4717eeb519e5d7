# ==============================================
# Drop Executor
# ==============================================
#
#   DROP TABLE <name>
#
#   Removes the table with exactly that name. A missing table
#   is reported, not raised.
#
# ==============================================

from ..parsing import parse_drop
from ..storage import Store


def execute_drop(raw: str, store: Store) -> str:
    """
    Run a DROP TABLE statement against the store.

    Raises:
        StatementSyntaxError: If the statement is malformed
    """
    statement = parse_drop(raw)

    if store.remove(statement.name) is not None:
        return f"Table '{statement.name}' is dropped!"
    return f"No table named '{statement.name}' found"
