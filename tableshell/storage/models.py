# ==============================================
# Store / Table / Row (Data Classes)
# ==============================================
#
# PURPOSE:
#   The in-memory data model every executor works on.
#   Holds data only; parsing and validation live in
#   parsing/ and execution/.
#
# TYPES:
# ------
# - Row = Dict[str, str]
#     Column name -> opaque text value.
#
# - Table (dataclass)
#     name: str              → Exact, case-sensitive table name
#     columns: List[str]     → Declared column order (authoritative row shape)
#     rows: List[Row]        → Insertion order, no sorting
#
#     Methods:
#     --------
#     - append_row(values) -> Row   → Zip columns with values positionally
#     - to_dict() / from_dict()     → Snapshot (de)serialization
#
# - Store
#     Mapping of table name -> Table. One per shell.
#
#     Methods:
#     --------
#     - get(name) / put(table) / remove(name)
#     - names() -> List[str]
#     - to_dict() / from_dict()     → Whole-store snapshot document
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..errors import SnapshotError


Row = Dict[str, str]


@dataclass
class Table:
    """
    A named table with an ordered column list and its rows.

    Column names are not required to be unique. With duplicates,
    positional zipping makes the last value win for that key.
    """

    name: str
    columns: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def append_row(self, values: List[str]) -> Row:
        """
        Build a row by pairing declared columns with values and append it.

        Callers check the value count first; this method does not.

        Args:
            values: One text value per declared column, in column order

        Returns:
            The row that was appended
        """
        row: Row = {}
        for column, value in zip(self.columns, values):
            row[column] = value
        self.rows.append(row)
        return row

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the table to a dictionary for the snapshot.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "name": self.name,
            "columns": list(self.columns),
            "rows": [dict(row) for row in self.rows],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_name: Optional[str] = None) -> "Table":
        """
        Reconstruct a Table from a snapshot record.

        Args:
            data: Dictionary with name, columns and rows
            default_name: Name to use when the record has none (the mapping key)

        Returns:
            A Table instance

        Raises:
            SnapshotError: If the record does not have the expected shape
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"table record must be an object, got {type(data).__name__}")

        name = data.get("name", default_name)
        if not isinstance(name, str):
            raise SnapshotError("table record has no usable name")

        columns = data.get("columns", [])
        if not isinstance(columns, list) or not all(isinstance(c, str) for c in columns):
            raise SnapshotError(f"table '{name}': columns must be a list of strings")

        rows = data.get("rows", [])
        if not isinstance(rows, list):
            raise SnapshotError(f"table '{name}': rows must be a list")
        for row in rows:
            if not isinstance(row, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in row.items()
            ):
                raise SnapshotError(f"table '{name}': every row must map column names to text")

        return cls(name=name, columns=list(columns), rows=[dict(r) for r in rows])


class Store:
    """
    All tables of one shell session, keyed by exact table name.

    The shell owns the only instance and hands it to one executor
    call at a time.
    """

    def __init__(self, tables: Optional[Dict[str, Table]] = None):
        self.tables: Dict[str, Table] = dict(tables or {})

    def get(self, name: str) -> Optional[Table]:
        return self.tables.get(name)

    def put(self, table: Table) -> Optional[Table]:
        """Insert or overwrite a table. Returns the table it replaced, if any."""
        previous = self.tables.get(table.name)
        self.tables[table.name] = table
        return previous

    def remove(self, name: str) -> Optional[Table]:
        return self.tables.pop(name, None)

    def names(self) -> List[str]:
        return list(self.tables)

    def __contains__(self, name: object) -> bool:
        return name in self.tables

    def __len__(self) -> int:
        return len(self.tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(self.tables.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self.tables == other.tables

    def __repr__(self) -> str:
        return f"Store(tables={self.names()!r})"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the whole store for the snapshot.

        Returns:
            {"tables": {name: table_record}}
        """
        return {
            "tables": {
                name: table.to_dict()
                for name, table in self.tables.items()
            }
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Store":
        """
        Rebuild a store from a snapshot document.

        Accepts the wrapped layout {"tables": {...}} and a bare
        {name: table_record} mapping.

        Raises:
            SnapshotError: If the document is not a valid store
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"snapshot must be an object, got {type(data).__name__}")

        # A wrapped document holds only table records under "tables";
        # a bare table record named "tables" has list and text values.
        records = data
        wrapped = data.get("tables")
        if set(data) == {"tables"} and isinstance(wrapped, dict) and all(
            isinstance(record, dict) for record in wrapped.values()
        ):
            records = wrapped

        tables: Dict[str, Table] = {}
        for key, record in records.items():
            table = Table.from_dict(record, default_name=key)
            tables[key] = table
        return cls(tables)
