# ==============================================
# TOPIC 4: PERSISTENCE (Store across restarts)
# ==============================================
#
# This package handles saving and loading the table store
# so that tables and rows survive process restarts.
#
# Modules:
# --------
# - snapshot_store.py  → Save/load the whole store as one JSON file
#
# ==============================================

from .snapshot_store import SnapshotStore

__all__ = [
    "SnapshotStore",
]
