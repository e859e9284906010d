"""
Child process supervision.

Spawns exactly one runner process with the launcher's own stdio, waits for it,
and makes the launcher exit the same way the child did.

On Windows ``subprocess`` never reports a terminating signal, so only exit
codes are forwarded there.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from collections.abc import Sequence
from typing import NoReturn

from mcp_atlassian_launcher.core.launch.errors import SpawnError
from mcp_atlassian_launcher.core.launch.models import ChildOutcome
from mcp_atlassian_launcher.core.launch.probe import resolve_executable

logger = logging.getLogger(__name__)

SPAWN_FAILURE_EXIT_CODE = 1


def spawn(command: str, args: Sequence[str]) -> subprocess.Popen[bytes]:
    """
    Start the runner without a shell, inheriting stdin/stdout/stderr.

    The executable is resolved on PATH the same way the probe resolves it.

    Raises:
        SpawnError: If the executable cannot be started
    """
    executable = resolve_executable(command)
    logger.debug(f"Spawning: {[executable, *args]}")
    try:
        return subprocess.Popen([executable, *args])
    except OSError as e:
        raise SpawnError(command, e) from e


def wait_for_child(process: subprocess.Popen[bytes]) -> ChildOutcome:
    """
    Block until the child exits.

    Ctrl+C reaches the whole foreground process group, so the child gets its
    own SIGINT; the launcher keeps waiting and reports what the child did.
    """
    while True:
        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            logger.debug(f"Interrupted while waiting for pid {process.pid}, still waiting")
            continue
        return ChildOutcome.from_returncode(returncode)


def forward_outcome(outcome: ChildOutcome) -> NoReturn:
    """
    Terminate the launcher the same way the child terminated.

    A signal is re-raised against this process with its default disposition,
    so a parent shell sees the same cause of death. If that signal does not
    terminate by default, exit with the shell convention 128 + signal.
    """
    if outcome.signal is not None:
        signum = outcome.signal
        logger.debug(f"Child killed by signal {signum}, re-raising")
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            signal.signal(signum, signal.SIG_DFL)
        except (OSError, ValueError) as e:
            # SIGKILL/SIGSTOP cannot be reassigned; they are already default
            logger.debug(f"Could not reset handler for signal {signum}: {e}")
        os.kill(os.getpid(), signum)
        sys.exit(128 + signum)

    exit_code = outcome.exit_code if outcome.exit_code is not None else 0
    logger.debug(f"Child exited with code {exit_code}")
    sys.exit(exit_code)


def run(command: str, args: Sequence[str]) -> NoReturn:
    """
    Spawn the runner and exit with its outcome.

    Does not return. If the runner cannot be started, prints a diagnostic to
    stderr and exits 1.
    """
    try:
        process = spawn(command, args)
    except SpawnError as e:
        print(f"Failed to start: {e}", file=sys.stderr)
        sys.exit(SPAWN_FAILURE_EXIT_CODE)

    forward_outcome(wait_for_child(process))


__all__ = [
    "SPAWN_FAILURE_EXIT_CODE",
    "spawn",
    "wait_for_child",
    "forward_outcome",
    "run",
]
