# file: gui_recorder/resolver.py
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from gui_recorder import runner
from gui_recorder.config import Settings
from gui_recorder.errors import ConfigurationError

PLAYWRIGHT_PACKAGE = "playwright"


@dataclass(frozen=True)
class Direct:
    """A `playwright` binary found on PATH (or via PLAYWRIGHT_BIN)."""

    command: str
    mode = "global"

    def wrap(self, args: Sequence[str]) -> List[str]:
        return list(args)

    def argv(self, args: Sequence[str]) -> List[str]:
        return [self.command, *self.wrap(args)]


@dataclass(frozen=True)
class Wrapped:
    """A package runner (npx) that resolves Playwright by package name."""

    command: str
    package: str = PLAYWRIGHT_PACKAGE
    mode = "npx"

    def wrap(self, args: Sequence[str]) -> List[str]:
        return [self.package, *args]

    def argv(self, args: Sequence[str]) -> List[str]:
        return [self.command, *self.wrap(args)]


Invoker = Union[Direct, Wrapped]


def try_global(settings: Settings) -> Optional[Invoker]:
    if runner.which_ok(settings.playwright_bin):
        return Direct(settings.playwright_bin)
    return None


def try_npx(settings: Settings) -> Optional[Invoker]:
    if runner.which_ok(settings.npx_bin):
        return Wrapped(settings.npx_bin)
    return None


def resolve_playwright(settings: Settings) -> Invoker:
    mode = settings.playwright_mode

    if mode == "global":
        invoker = try_global(settings)
        if invoker is None:
            raise ConfigurationError(
                f"PLAYWRIGHT_MODE=global but `{settings.playwright_bin}` not found. "
                "Install Playwright or set PLAYWRIGHT_BIN."
            )
        return invoker

    if mode == "npx":
        invoker = try_npx(settings)
        if invoker is None:
            raise ConfigurationError(
                f"PLAYWRIGHT_MODE=npx but `{settings.npx_bin}` not found on PATH."
            )
        return invoker

    if mode not in (None, "auto"):
        print(f"⚠️  Unknown PLAYWRIGHT_MODE={mode!r}, falling back to auto-detect", file=sys.stderr)

    # Auto-detect: prefer the global binary, fall back to npx
    invoker = try_global(settings) or try_npx(settings)
    if invoker is None:
        raise ConfigurationError(
            "Could not find Playwright (global) or npx. "
            "Install Playwright or Node+npx, or set PLAYWRIGHT_MODE / PLAYWRIGHT_BIN / NPX_BIN."
        )
    print(f"(resolver) -> Using Playwright via {invoker.mode}: {invoker.command}")
    return invoker
