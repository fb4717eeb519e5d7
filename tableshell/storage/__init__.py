# ==============================================
# TOPIC 1: STORAGE (In-memory table store)
# ==============================================
#
# This package holds the data model the executors work on.
# It has no behavior beyond holding and (de)serializing data.
#
# Modules:
# --------
# - models.py    → Store, Table and the Row alias
#
# ==============================================

from .models import Row, Store, Table

__all__ = [
    "Row",
    "Store",
    "Table",
]
