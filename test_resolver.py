from dataclasses import replace

import pytest

from gui_recorder import resolver, runner
from gui_recorder.config import Settings
from gui_recorder.errors import ConfigurationError


@pytest.fixture
def available(monkeypatch):
    """Pretend only the given commands exist."""
    def install(*commands):
        probed = []

        def fake_which_ok(cmd):
            probed.append(cmd)
            return cmd in commands

        monkeypatch.setattr(runner, "which_ok", fake_which_ok)
        return probed
    return install


def test_auto_prefers_global_binary(available, settings):
    probed = available("playwright", "npx")

    invoker = resolver.resolve_playwright(settings)

    assert invoker == resolver.Direct("playwright")
    assert invoker.mode == "global"
    assert invoker.argv(["show-trace", "t.zip"]) == ["playwright", "show-trace", "t.zip"]
    assert probed == ["playwright"]


def test_auto_falls_back_to_npx(available, settings):
    available("npx")

    invoker = resolver.resolve_playwright(settings)

    assert invoker.mode == "npx"
    assert invoker.wrap(["codegen", "https://example.com"]) == ["playwright", "codegen", "https://example.com"]
    assert invoker.argv(["show-trace", "t.zip"]) == ["npx", "playwright", "show-trace", "t.zip"]


def test_auto_fails_when_nothing_is_installed(available, settings):
    available()

    with pytest.raises(ConfigurationError, match="PLAYWRIGHT_MODE"):
        resolver.resolve_playwright(settings)


def test_forced_global_does_not_fall_back(available, settings):
    available("npx")

    with pytest.raises(ConfigurationError, match="PLAYWRIGHT_BIN"):
        resolver.resolve_playwright(replace(settings, playwright_mode="global"))


def test_forced_npx_skips_global_binary(available, settings):
    probed = available("playwright", "npx")

    invoker = resolver.resolve_playwright(replace(settings, playwright_mode="npx"))

    assert isinstance(invoker, resolver.Wrapped)
    assert probed == ["npx"]


def test_forced_npx_without_launcher(available, settings):
    available("playwright")

    with pytest.raises(ConfigurationError, match="npx"):
        resolver.resolve_playwright(replace(settings, playwright_mode="npx"))


def test_unknown_mode_is_treated_as_auto(available, settings):
    available("playwright")

    invoker = resolver.resolve_playwright(replace(settings, playwright_mode="docker"))

    assert invoker.mode == "global"


def test_settings_from_env():
    settings = Settings.from_env({
        "PLAYWRIGHT_MODE": " NPX ",
        "NPX_BIN": "/opt/node/bin/npx",
        "PYTHON_BIN": "/usr/bin/python3",
        "RECORDER_TESTS_DIR": "recordings",
    })

    assert settings.playwright_mode == "npx"
    assert settings.npx_bin == "/opt/node/bin/npx"
    assert settings.python_bin == "/usr/bin/python3"
    assert str(settings.history_path).replace("\\", "/") == "recordings/history.json"
    assert str(settings.sessions_dir).replace("\\", "/") == "recordings/sessions"
    assert settings.subprocess_env == {
        "PLAYWRIGHT_TRACE_VIEWER_HOST": "127.0.0.1",
        "PLAYWRIGHT_FORCE_IPV4": "1",
    }


def test_settings_from_env_defaults():
    settings = Settings.from_env({})

    assert settings.playwright_mode is None
    assert settings.playwright_bin == "playwright"
    assert str(settings.history_path).replace("\\", "/") == "tests/history.json"
