"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest
from pathlib import Path

from lifecommit.__main__ import main


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LIFE_COMMIT_HOME", str(tmp_path / "home"))
    return tmp_path / "home"


class TestMain:
    @pytest.mark.parametrize("argv", [[], ["push"]])
    def test_usage(self, argv: list[str], capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 1
        assert "Usage: life <command>" in capsys.readouterr().out

    def test_init_then_log(self, home: Path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["init"])
        assert exc.value.code == 0
        assert (home / "commits.json").exists()

        with pytest.raises(SystemExit) as exc:
            main(["log"])
        assert exc.value.code == 0

    def test_failure_sets_exit_status(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["log"])
        assert exc.value.code == 1
        assert "ERROR: Please initialize your life first." in capsys.readouterr().err
