# file: gui_recorder/errors.py
from typing import Sequence


class RecorderError(RuntimeError):
    """Base class for errors raised by the recorder and replay flows."""


class ConfigurationError(RecorderError):
    """Playwright (or the launcher used to reach it) could not be found."""


class InvalidInputError(RecorderError, ValueError):
    """The user answered a prompt with a value outside the allowed set."""


class CommandError(RecorderError):
    def __init__(self, argv: Sequence[str], returncode: int):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Command failed: {' '.join(self.argv)}")
