# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - app_config       → AppConfig pointing at a tmp_path snapshot
# - snapshot_store   → SnapshotStore on that snapshot
# - store            → Store with a small "users" table
# - shell            → Shell wired to the temp snapshot, already started
# - run_script       → Drive shell.run() with a list of input lines
#
# NOTES:
# ------
# - Use tmp_path for every snapshot file
# - The config singleton is reset around each test
# ==============================================

import pytest

from tableshell.config import AppConfig, ShellConfig, SnapshotConfig, reset_config
from tableshell.persistence import SnapshotStore
from tableshell.shell import Shell
from tableshell.storage import Store, Table


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def snapshot_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def app_config(snapshot_path):
    return AppConfig(
        snapshot=SnapshotConfig(path=str(snapshot_path)),
        shell=ShellConfig(prompt="> "),
    )


@pytest.fixture
def snapshot_store(snapshot_path):
    return SnapshotStore(snapshot_path)


@pytest.fixture
def store():
    """Store holding users(id, name) with two rows."""
    users = Table(name="users", columns=["id", "name"])
    users.append_row(["1", "Alice"])
    users.append_row(["2", "Bob"])
    return Store({"users": users})


@pytest.fixture
def shell(app_config, snapshot_store, capsys):
    """Started shell with an empty store; banner output is discarded."""
    sh = Shell(app_config, snapshot_store=snapshot_store)
    sh.start()
    capsys.readouterr()
    return sh


@pytest.fixture
def run_script():
    """Feed lines to shell.run() as if typed at the prompt; EOF after the last one."""
    def _run(shell, lines):
        feed = iter(lines)

        def read_line(prompt):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        return shell.run(read_line)
    return _run
