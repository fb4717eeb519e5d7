# ==============================================
# Shell — Read-Eval-Print Loop
# ==============================================
#
# PURPOSE:
#   Ties the 4 topics together: reads a line, classifies it,
#   dispatches to an executor with the store, prints the
#   outcome. This is the class the CLI drives.
#
# FLOW:
#
#   input line
#       │
#       ▼
#   classify()  ──► HELP / EXIT / UNKNOWN handled here
#       │
#       ▼
#   executor(raw, store)  ──► message / ResultSet / TableShellError
#       │
#       ▼
#   print
#
# CLASS: Shell
# ------------
#   Constructor:
#   ------------
#   - __init__(config=None, snapshot_store=None, store=None)
#       1. Load config (from .env or passed in)
#       2. Build SnapshotStore from config unless one is given
#       3. Start with the given store, or an empty one until start()
#
#   Public Methods:
#   ---------------
#   - start() -> None          → Load snapshot (if enabled), print banner
#   - execute(line) -> bool    → Run one line; False once the loop must stop
#   - run(read_line) -> int    → Prompt loop; returns process exit code
#
# ==============================================

import logging
from typing import Callable, Dict, Optional, Union

from .config import AppConfig, get_config
from .errors import TableShellError
from .execution import ResultSet, execute_create, execute_drop, execute_insert, execute_select
from .parsing import StatementKind, classify
from .persistence import SnapshotStore
from .storage import Store


logger = logging.getLogger(__name__)


HELP_LINES = (
    "Available commands:",
    " CREATE TABLE <name> (<columns>)",
    " INSERT INTO <table> VALUES (...)",
    " SELECT <columns> FROM <table>",
    " SELECT * FROM <table>",
    " DROP TABLE <table>",
    " HELP",
    " EXIT",
)

Executor = Callable[[str, Store], Union[str, ResultSet]]

EXECUTORS: Dict[StatementKind, Executor] = {
    StatementKind.CREATE: execute_create,
    StatementKind.INSERT: execute_insert,
    StatementKind.SELECT: execute_select,
    StatementKind.DROP: execute_drop,
}


class Shell:
    """
    Interactive shell over one exclusively owned table store.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        snapshot_store: Optional[SnapshotStore] = None,
        store: Optional[Store] = None,
    ):
        """
        Args:
            config: Application configuration. If None, loads from environment.
            snapshot_store: Persistence collaborator. Built from config if None.
            store: Initial store. When given, start() does not load the snapshot.
        """
        self._config = config or get_config()
        self._snapshot_store = snapshot_store or SnapshotStore(
            self._config.snapshot.path,
            indent=self._config.snapshot.indent,
        )
        self._preloaded = store is not None
        self.store = store if store is not None else Store()
        self.exit_code = 0
        self._started = False
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Load the snapshot (unless disabled or preloaded) and greet the user."""
        if not self._preloaded and self._config.shell.load_on_start:
            self.store = self._snapshot_store.load()
        self._started = True
        print("Welcome to tableshell. Type HELP for commands, EXIT to quit.")

    def execute(self, line: str) -> bool:
        """
        Classify and run one input line.

        Args:
            line: Raw console input

        Returns:
            False once EXIT has run and no more lines should be read
        """
        if not self._running:
            return False

        statement = classify(line)
        logger.debug("Classified %r as %s", statement.raw, statement.kind.name)

        if statement.kind is StatementKind.EXIT:
            self.exit()
            return False

        if statement.kind is StatementKind.HELP:
            self.print_help()
        elif statement.kind is StatementKind.UNKNOWN:
            if not statement.is_blank:
                print(f"Unrecognized command: '{statement.raw}'. Type HELP for a list of commands.")
        else:
            self._dispatch(statement.kind, statement.raw)

        return True

    def _dispatch(self, kind: StatementKind, raw: str) -> None:
        executor = EXECUTORS[kind]
        try:
            outcome = executor(raw, self.store)
        except TableShellError as e:
            logger.debug("%s rejected: %s", kind.name, e)
            print(e)
            return

        if isinstance(outcome, ResultSet):
            for output_line in outcome.render():
                print(output_line)
        else:
            print(outcome)

    def print_help(self) -> None:
        for help_line in HELP_LINES:
            print(help_line)

    def exit(self) -> None:
        """Persist the store, say goodbye and stop the loop."""
        if not self._snapshot_store.save(self.store):
            self.exit_code = 1
        print("Exiting...")
        self._running = False

    def run(self, read_line: Optional[Callable[[str], str]] = None) -> int:
        """
        Prompt for lines until EXIT, end of input or Ctrl-C.

        Args:
            read_line: Prompt-and-read function, builtin `input` if None

        Returns:
            0 on a clean exit, 1 if the final snapshot could not be saved
        """
        if not self._started:
            self.start()

        read_line = read_line or input
        prompt = self._config.shell.prompt
        while self._running:
            try:
                line = read_line(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                self.exit()
                break
            self.execute(line)

        return self.exit_code
