# ==============================================
# Tests for CLI entry point
# ==============================================

import json

import pytest

from tableshell import cli
from tableshell.config import AppConfig


@pytest.fixture
def typed(monkeypatch):
    """Replace builtin input() with a scripted sequence of lines."""
    def _typed(lines):
        feed = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
    return _typed


class TestArguments:
    def test_overrides(self):
        args = cli.build_parser().parse_args(["--snapshot", "x.json", "--no-load", "--log-level", "debug"])
        config = cli.apply_overrides(AppConfig(), args)

        assert config.snapshot.path == "x.json"
        assert config.shell.load_on_start is False
        assert config.log_level == "DEBUG"

    def test_defaults_keep_config(self):
        base = AppConfig()
        config = cli.apply_overrides(base, cli.build_parser().parse_args([]))
        assert config == base

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--log-level", "LOUD"])


class TestMain:
    def test_session_persists_between_runs(self, tmp_path, typed, capsys):
        snapshot = tmp_path / "tables.json"

        typed(["CREATE TABLE t (a, b)", "INSERT INTO t VALUES (1, 2)", "EXIT"])
        assert cli.main(["--snapshot", str(snapshot)]) == 0
        assert json.loads(snapshot.read_text(encoding="utf-8"))["tables"]["t"]["columns"] == ["a", "b"]

        capsys.readouterr()
        typed(["select b, a from t", "EXIT"])
        assert cli.main(["--snapshot", str(snapshot)]) == 0
        assert '["2", "1"]' in capsys.readouterr().out

    def test_no_load_starts_empty(self, tmp_path, typed, capsys):
        snapshot = tmp_path / "tables.json"
        typed(["CREATE TABLE t (a)", "EXIT"])
        cli.main(["--snapshot", str(snapshot)])
        capsys.readouterr()

        typed(["SELECT * FROM t", "EXIT"])
        cli.main(["--snapshot", str(snapshot), "--no-load"])
        assert "Table 't' not found" in capsys.readouterr().out

    def test_reset_deletes_snapshot_before_start(self, tmp_path, typed, capsys):
        snapshot = tmp_path / "tables.json"
        typed(["CREATE TABLE t (a)", "EXIT"])
        cli.main(["--snapshot", str(snapshot)])
        capsys.readouterr()

        typed(["SELECT * FROM t", "EXIT"])
        assert cli.main(["--snapshot", str(snapshot), "--reset"]) == 0

        out = capsys.readouterr().out
        assert f"Deleted {snapshot}" in out
        assert "Table 't' not found" in out
        assert json.loads(snapshot.read_text(encoding="utf-8")) == {"tables": {}}

    def test_uncreatable_snapshot_directory_is_reported(self, tmp_path, typed, capsys):
        """The shell still starts; only the final save fails."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x", encoding="utf-8")

        typed(["CREATE TABLE t (a)", "EXIT"])
        assert cli.main(["--snapshot", str(blocker / "db.json")]) == 1

        out = capsys.readouterr().out
        assert "Table t created!" in out
        assert "Unable to save snapshot" in out
