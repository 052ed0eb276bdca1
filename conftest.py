import pytest

from gui_recorder.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        tests_dir=tmp_path / "tests",
        playwright_bin="playwright",
        npx_bin="npx",
        python_bin="python",
    )


@pytest.fixture
def answers(monkeypatch):
    """Feed canned replies to input(), in order."""
    def feed(*replies):
        remaining = iter(replies)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise AssertionError(f"Unexpected prompt: {prompt!r}")

        monkeypatch.setattr("builtins.input", fake_input)
    return feed
