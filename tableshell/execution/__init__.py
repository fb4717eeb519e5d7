# ==============================================
# TOPIC 3: EXECUTION (Statement executors)
# ==============================================
#
# One executor per statement form. Each takes the original
# raw line and the store for a single call, and keeps no
# reference to the store afterwards.
#
# Modules:
# --------
# - create.py   → CREATE TABLE
# - insert.py   → INSERT INTO ... VALUES
# - select.py   → SELECT ... FROM
# - drop.py     → DROP TABLE
# - results.py  → ResultSet returned by SELECT
#
# ==============================================

from .create import execute_create
from .drop import execute_drop
from .insert import execute_insert
from .results import NULL, ResultSet
from .select import execute_select

__all__ = [
    "execute_create",
    "execute_drop",
    "execute_insert",
    "execute_select",
    "NULL",
    "ResultSet",
]
