import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..errors import SnapshotError
from ..storage import Store


logger = logging.getLogger(__name__)


# ==============================================
# SnapshotStore
# ==============================================
#
# PURPOSE:
#   Persist the whole table store to one JSON file so that the
#   tables survive a restart of the shell.
#
# WHAT IS PERSISTED:
#   {"tables": {name: {"name", "columns", "rows"}}}
#
# FAILURE MODES:
#   load()  → missing or unparseable file degrades to an empty
#             store. The unreadable file is left in place.
#   save()  → written to a temp file and moved over the snapshot
#             with os.replace, so the old snapshot survives a
#             failed or interrupted write. Returns False on failure.
#
# CLASS: SnapshotStore
# --------------------
#   Stateful: holds the snapshot path.
#
#   Constructor:
#   ------------
#   - __init__(path: str = "db.json", indent: int = 2)
#       Only records the path; save() creates the parent directory.
#
class SnapshotStore:
    """
    Handles persistence of the table store to disk.

    File created:
    - <path>   → every table with its columns and rows
    """

    def __init__(self, path: Union[str, Path] = "db.json", indent: int = 2):
        """
        Initialize the snapshot store.

        Args:
            path: Snapshot file location
            indent: JSON indentation used when saving
        """
        self.path = Path(path)
        self.indent = indent

#   Methods:
#   --------
#   - load() -> Store
#       Read and decode the snapshot. Empty store on any failure.
#
#   - save(store: Store) -> bool
#       Atomically replace the snapshot with the given store.
#
    def load(self) -> Store:
        """
        Load the store from disk.

        Returns:
            The persisted Store, or an empty Store if the snapshot
            is missing or cannot be parsed
        """
        if not self.exists():
            print(f"No snapshot found at {self.path}")
            return Store()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
            store = Store.from_dict(document)
        except (OSError, ValueError, SnapshotError) as e:
            logger.warning("Snapshot %s is unreadable: %s", self.path, e)
            print(f"Could not parse snapshot {self.path}: {e}")
            return Store()

        print(f"Loaded {len(store)} tables from {self.path}")
        return store

    def save(self, store: Store) -> bool:
        """
        Save the store to disk.

        Args:
            store: Store to snapshot in full

        Returns:
            True if the snapshot was written, False otherwise
        """
        tmp_name = None
        try:
            # Create directory if it doesn't exist
            self.path.parent.mkdir(parents=True, exist_ok=True)

            payload = json.dumps(store.to_dict(), indent=self.indent, ensure_ascii=False)

            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())

            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Snapshot write to %s failed: %s", self.path, e)
            print(f"Unable to save snapshot to {self.path}: {e}")
            return False
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        print(f"Saved {len(store)} tables to {self.path}")
        return True

#   UTILITY:
#   - exists() -> bool
#       Check if a snapshot file exists (i.e., is this a restart?).
#
#   - clear() -> bool
#       Delete the snapshot file (tableshell --reset).
#
    def exists(self) -> bool:
        """
        Check if the snapshot file exists.

        Returns:
            True if this is a restart (snapshot exists), False if fresh start
        """
        return self.path.exists()

    def clear(self) -> bool:
        """
        Delete the snapshot file so the next start is a fresh one.

        Returns:
            False if an existing snapshot could not be deleted
        """
        if not self.exists():
            return True

        try:
            self.path.unlink()
        except OSError as e:
            logger.warning("Could not delete snapshot %s: %s", self.path, e)
            print(f"Unable to delete snapshot {self.path}: {e}")
            return False

        print(f"Deleted {self.path}")
        return True
