# file: gui_recorder/runner.py
import os
import subprocess
from typing import Dict, List, Sequence

from gui_recorder.config import Settings
from gui_recorder.errors import CommandError


def build_env(settings: Settings) -> Dict[str, str]:
    """Inherited environment with the Playwright overrides merged on top."""
    env = dict(os.environ)
    env.update(settings.subprocess_env)
    return env


def _announce(argv: Sequence[str], settings: Settings) -> None:
    print(f"(runner) -> Running command: {' '.join(argv)}")
    print(f"(runner) -> With env: {settings.subprocess_env}")


def run(argv: Sequence[str], settings: Settings) -> None:
    """Run a command attached to this terminal and wait for it.

    Raises CommandError on a non-zero exit code.
    """
    argv = list(argv)
    _announce(argv, settings)
    proc = subprocess.run(argv, env=build_env(settings))
    if proc.returncode != 0:
        raise CommandError(argv, proc.returncode)


def spawn(argv: Sequence[str], settings: Settings) -> subprocess.Popen:
    argv = list(argv)
    _announce(argv, settings)
    return subprocess.Popen(argv, env=build_env(settings))


def run_parallel(commands: Sequence[Sequence[str]], settings: Settings) -> None:
    """Start every command, then wait for all of them.

    Every process is started before the first wait. Once all have exited the
    first failure (in launch order) is raised as a CommandError. If a launch
    fails, the processes already started are waited for before re-raising.
    """
    procs: List[subprocess.Popen] = []
    for argv in commands:
        try:
            procs.append(spawn(argv, settings))
        except OSError:
            for proc in procs:
                proc.wait()
            raise

    failures = []
    for argv, proc in zip(commands, procs):
        code = proc.wait()
        if code != 0:
            failures.append(CommandError(argv, code))

    if failures:
        raise failures[0]


def which_ok(cmd: str) -> bool:
    """True when `cmd --version` can be spawned and exits with status 0."""
    try:
        proc = subprocess.run(
            [cmd, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return proc.returncode == 0
