# file: gui_recorder/config.py
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

IS_WINDOWS = sys.platform.startswith("win")

DEFAULT_TESTS_DIR = "tests"
TRACE_VIEWER_HOST = "127.0.0.1"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration shared by every flow and subprocess call."""

    tests_dir: Path = Path(DEFAULT_TESTS_DIR)
    playwright_mode: Optional[str] = None
    # pip installs playwright.exe on Windows, which PATH lookup finds by bare name
    playwright_bin: str = "playwright"
    npx_bin: str = "npx.cmd" if IS_WINDOWS else "npx"
    python_bin: str = sys.executable or "python"
    trace_viewer_host: str = TRACE_VIEWER_HOST

    @property
    def sessions_dir(self) -> Path:
        return self.tests_dir / "sessions"

    @property
    def history_path(self) -> Path:
        return self.tests_dir / "history.json"

    @property
    def subprocess_env(self) -> Dict[str, str]:
        """Variables forced onto every child process."""
        return {
            "PLAYWRIGHT_TRACE_VIEWER_HOST": self.trace_viewer_host,
            "PLAYWRIGHT_FORCE_IPV4": "1",
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            load_dotenv()
            environ = os.environ

        defaults = cls()
        mode = (environ.get("PLAYWRIGHT_MODE") or "").strip().lower() or None
        return cls(
            tests_dir=Path(environ.get("RECORDER_TESTS_DIR") or DEFAULT_TESTS_DIR),
            playwright_mode=mode,
            playwright_bin=environ.get("PLAYWRIGHT_BIN") or defaults.playwright_bin,
            npx_bin=environ.get("NPX_BIN") or defaults.npx_bin,
            python_bin=environ.get("PYTHON_BIN") or defaults.python_bin,
        )
