# ==============================================
# ResultSet
# ==============================================
#
# PURPOSE:
#   The projected output of a SELECT, kept separate from
#   printing so tests can inspect it directly.
#
# RENDERING:
# ----------
#   Table: <name>
#   ["col1", "col2"]
#   ["v1", "v2"]          (one line per row)
#
# ==============================================

import json
from dataclasses import dataclass, field
from typing import List


NULL = "NULL"


@dataclass
class ResultSet:
    """Rows resolved to values in projected-column order."""

    table: str
    columns: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def render(self) -> List[str]:
        """
        Format the result for the console.

        Returns:
            Output lines: header, column list, then one line per row
        """
        lines = [f"Table: {self.table}", json.dumps(self.columns, ensure_ascii=False)]
        lines.extend(json.dumps(row, ensure_ascii=False) for row in self.rows)
        return lines
