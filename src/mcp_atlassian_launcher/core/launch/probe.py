"""
Runner detection.

Checks whether uvx, uv or docker can be executed on this machine.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable

from mcp_atlassian_launcher.core.launch.models import RUNNER_PRECEDENCE, Capabilities

logger = logging.getLogger(__name__)

# Some tools exit 1 or 2 on `--version` (unknown flag, usage error) yet are
# still usable runners.
PRESENT_EXIT_CODES = frozenset({0, 1, 2})


def resolve_executable(command: str) -> str:
    """
    Full path of ``command`` on PATH, or the bare name when it is not found.

    On Windows this resolves ``.exe``/``.cmd`` shims that CreateProcess would
    not find by bare name.
    """
    return shutil.which(command) or command


def probe_command(command: str) -> bool:
    """
    Check if a command is installed and runnable.

    Runs ``command --version`` with all output discarded and no shell.

    Args:
        command: Executable name (e.g., "uvx")

    Returns:
        True if the command ran and exited with 0, 1 or 2

    Examples:
        >>> probe_command("python3")
        True
        >>> probe_command("definitely-not-a-real-tool")
        False
    """
    executable = resolve_executable(command)
    try:
        result = subprocess.run(
            [executable, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Probe for {command} failed: {e}")
        return False

    present = result.returncode in PRESENT_EXIT_CODES
    logger.debug(f"Probe for {command}: exit {result.returncode}, present={present}")
    return present


def probe_capabilities(probe: Callable[[str], bool] = probe_command) -> Capabilities:
    """
    Probe candidate runners in precedence order.

    Stops at the first runner found; later candidates are left unprobed.

    Args:
        probe: Command probe, injectable for tests

    Returns:
        Capabilities with at most one runner marked present
    """
    found: dict[str, bool] = {}
    for choice in RUNNER_PRECEDENCE:
        if probe(choice.command):
            found[choice.command] = True
            break
    return Capabilities(**found)


__all__ = [
    "PRESENT_EXIT_CODES",
    "resolve_executable",
    "probe_command",
    "probe_capabilities",
]
