import json

import pytest

from gui_recorder import main as cli
from gui_recorder.errors import ConfigurationError


def test_exit_creates_workspace(settings, answers):
    answers("3")

    cli.main_menu(settings)

    assert settings.sessions_dir.is_dir()
    assert json.loads(settings.history_path.read_text(encoding="utf-8")) == []


def test_flow_errors_are_contained(settings, answers, monkeypatch, capsys):
    ran = []

    def broken_record(s):
        ran.append("record")
        raise ConfigurationError("Could not find Playwright (global) or npx.")

    monkeypatch.setitem(cli.ACTIONS, "record", broken_record)
    monkeypatch.setitem(cli.ACTIONS, "replay", lambda s: ran.append("replay"))
    answers("1", "replay", "exit")

    cli.main_menu(settings)

    assert ran == ["record", "replay"]
    err = capsys.readouterr().err
    assert "❌ Error: Could not find Playwright" in err
    assert "Hint:" in err


def test_unknown_menu_choice_keeps_looping(settings, answers, capsys):
    answers("dance", "exit")

    cli.main_menu(settings)

    assert "Unknown menu choice" in capsys.readouterr().err


def test_main_returns_zero_on_exit(tmp_path, monkeypatch, answers):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RECORDER_TESTS_DIR", str(tmp_path / "data"))
    answers("3")

    assert cli.main() == 0
    assert (tmp_path / "data" / "history.json").exists()


def test_main_treats_eof_as_exit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RECORDER_TESTS_DIR", str(tmp_path / "data"))

    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    assert cli.main() == 0


def test_main_fails_when_workspace_cannot_be_created(tmp_path, monkeypatch, answers, capsys):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RECORDER_TESTS_DIR", str(blocker))
    answers()

    assert cli.main() == 1
    assert "❌ Error" in capsys.readouterr().err
