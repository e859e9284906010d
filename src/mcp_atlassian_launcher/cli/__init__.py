"""
Launcher CLI - main entry point.

Every argument is handed to the selected runner untouched, so there is no
option parser here: ``--help``, ``--version`` and ``--`` all belong to the
mcp-atlassian server.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import NoReturn

from mcp_atlassian_launcher.cli.errors import ExitCode, print_no_runner_error
from mcp_atlassian_launcher.core.config import LauncherSettings
from mcp_atlassian_launcher.core.launch import (
    Invocation,
    NoRunnerAvailableError,
    resolve_launch_plan,
    run,
)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """
    Configure launcher logging.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """
    Pick a runner, launch mcp-atlassian, and exit with its outcome.

    Args:
        argv: Caller arguments (default: ``sys.argv[1:]``)
    """
    if argv is None:
        argv = sys.argv[1:]

    invocation = Invocation.capture(argv, os.environ)
    settings = LauncherSettings.from_environ(invocation.environ)
    configure_logging(settings.debug)

    if settings.pypi_version:
        logger.debug(f"Pinned mcp-atlassian version: {settings.pypi_version}")

    try:
        plan = resolve_launch_plan(invocation, pypi_version=settings.pypi_version)
    except NoRunnerAvailableError as e:
        logger.debug(str(e))
        print_no_runner_error()
        sys.exit(ExitCode.GENERAL_ERROR)

    run(plan.command, plan.args)


def cli_main() -> None:
    """Console script entry point."""
    main()


__all__ = ["cli_main", "configure_logging", "main"]
