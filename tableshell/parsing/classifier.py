# ==============================================
# Statement Classifier
# ==============================================
#
# PURPOSE:
#   Map one raw input line to a tagged Statement so the shell
#   knows which executor (or terminal action) to dispatch to.
#
# RULES:
# ------
#   The line is trimmed and a lower-cased copy is used for
#   keyword matching only. The original-case trimmed text is
#   what executors receive.
#
#     "help" / "exit" (optionally followed by ";")  → HELP / EXIT
#     starts with create / insert / select / drop   → that kind
#     empty line                                    → UNKNOWN("")
#     anything else                                 → UNKNOWN(raw)
#
#   Unrecognized input is its own kind. It is never reported
#   as a HELP request.
#
# ==============================================

from dataclasses import dataclass
from enum import Enum


class StatementKind(Enum):
    CREATE = "create"
    INSERT = "insert"
    SELECT = "select"
    DROP = "drop"
    EXIT = "exit"
    HELP = "help"
    UNKNOWN = "unknown"


# Checked in order against the lower-cased line
_PREFIXES = (
    ("create", StatementKind.CREATE),
    ("insert", StatementKind.INSERT),
    ("select", StatementKind.SELECT),
    ("drop", StatementKind.DROP),
)


@dataclass(frozen=True)
class Statement:
    """A classified input line: its kind plus the original trimmed text."""
    kind: StatementKind
    raw: str = ""

    @property
    def is_blank(self) -> bool:
        return self.kind is StatementKind.UNKNOWN and not self.raw


def classify(line: str) -> Statement:
    """
    Classify one input line.

    Args:
        line: Raw text as read from the console

    Returns:
        Statement tagged with its kind and carrying the trimmed line
    """
    raw = line.strip()
    lowered = raw.lower()
    keyword = lowered.rstrip(";").rstrip()

    if keyword == "help":
        return Statement(StatementKind.HELP, raw)
    if keyword == "exit":
        return Statement(StatementKind.EXIT, raw)

    for prefix, kind in _PREFIXES:
        if lowered.startswith(prefix):
            return Statement(kind, raw)

    return Statement(StatementKind.UNKNOWN, raw)
