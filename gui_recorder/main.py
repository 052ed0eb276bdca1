#!/usr/bin/env python3
"""
GUI Test Recorder CLI

Records browser sessions with Playwright codegen and replays their traces in
the Playwright trace viewer. Everything is stored under tests/ (or
RECORDER_TESTS_DIR): history.json plus one folder per session.

Usage:
    python -m gui_recorder.main

Works with a global `playwright` binary or with `npx playwright`. Force one
with PLAYWRIGHT_MODE=global|npx; override binaries with PLAYWRIGHT_BIN,
NPX_BIN and PYTHON_BIN. Values may also come from a .env file.
"""

import sys

from gui_recorder.config import Settings
from gui_recorder.errors import InvalidInputError
from gui_recorder.graph.compile import record_new_test, replay_test
from gui_recorder.history import save_history
from gui_recorder.prompts import ask_choice

MENU_OPTIONS = [
    ("Record new test", "record"),
    ("Replay a test", "replay"),
    ("Exit", "exit"),
]

HINT = "Hint: Ensure Playwright is installed. Set PLAYWRIGHT_MODE=npx if you prefer npx.\n"

ACTIONS = {
    "record": record_new_test,
    "replay": replay_test,
}


def ensure_workspace(settings: Settings) -> None:
    settings.sessions_dir.mkdir(parents=True, exist_ok=True)
    if not settings.history_path.exists():
        save_history(settings.history_path, [])


def main_menu(settings: Settings) -> None:
    ensure_workspace(settings)

    while True:
        choice = ask_choice("🎥 GUI Test Recorder CLI", MENU_OPTIONS)
        if choice == "exit":
            return

        try:
            action = ACTIONS.get(choice)
            if action is None:
                raise InvalidInputError(f"Unknown menu choice: {choice!r}")
            action(settings)
        except Exception as e:
            print(f"\n❌ Error: {e}", file=sys.stderr)
            print(HINT, file=sys.stderr)


def main() -> int:
    try:
        main_menu(Settings.from_env())
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
