# ==============================================
# Statement AST
# ==============================================
#
# One dataclass per statement form the parser can produce.
# Executors consume these instead of raw text.
#
# ==============================================

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass
class CreateTable:
    name: str
    columns: List[str]


@dataclass
class InsertRow:
    table: str
    values: List[str]


@dataclass
class SelectRows:
    table: str
    columns: Optional[List[str]]  # None means "*"

    @property
    def select_all(self) -> bool:
        return self.columns is None


@dataclass
class DropTable:
    name: str


StatementNode = Union[CreateTable, InsertRow, SelectRows, DropTable]
