"""
Runner selection and launch planning.

``plan_launch`` is a pure function of the probed capabilities and the
invocation; ``resolve_launch_plan`` adds the probing.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

from mcp_atlassian_launcher.core.launch.environment import build_container_spec
from mcp_atlassian_launcher.core.launch.errors import NoRunnerAvailableError
from mcp_atlassian_launcher.core.launch.models import (
    RUNNER_PRECEDENCE,
    Capabilities,
    Invocation,
    LaunchPlan,
    RunnerChoice,
)
from mcp_atlassian_launcher.core.launch.probe import probe_capabilities, probe_command

logger = logging.getLogger(__name__)

PACKAGE_NAME = "mcp-atlassian"
ENTRY_COMMAND = "mcp-atlassian"


def package_specifier(version: str | None = None) -> str:
    """
    Package specifier handed to uv, pinned when a version is given.

    Examples:
        >>> package_specifier()
        'mcp-atlassian'
        >>> package_specifier("0.11.9")
        'mcp-atlassian==0.11.9'
    """
    if version:
        return f"{PACKAGE_NAME}=={version}"
    return PACKAGE_NAME


def choose_runner(capabilities: Capabilities) -> RunnerChoice:
    """First present runner in precedence order (uvx, uv, docker), else NONE."""
    for choice in RUNNER_PRECEDENCE:
        if capabilities.has(choice):
            return choice
    return RunnerChoice.NONE


def plan_launch(
    capabilities: Capabilities,
    invocation: Invocation,
    *,
    pypi_version: str | None = None,
    platform: str | None = None,
    home: Path | None = None,
) -> LaunchPlan:
    """
    Build the launch plan for the preferred available runner.

    Caller arguments are appended unmodified and in order for every runner.

    Args:
        capabilities: Probe results
        invocation: Caller arguments and environment snapshot
        pypi_version: Pinned mcp-atlassian version for uvx/uv
        platform: Host platform for the Docker mount check (default: sys.platform)
        home: Home directory for the token cache, looked up only when mounted

    Returns:
        LaunchPlan for uvx, uv or docker

    Raises:
        NoRunnerAvailableError: If no runner is available

    Examples:
        >>> plan = plan_launch(Capabilities(uvx=True), Invocation.capture(["-v"], {}))
        >>> plan.argv
        ['uvx', '--from', 'mcp-atlassian', 'mcp-atlassian', '-v']
    """
    choice = choose_runner(capabilities)

    if choice is RunnerChoice.PACKAGE_RUNNER:
        spec = package_specifier(pypi_version)
        return LaunchPlan(
            choice=choice,
            command=choice.command,
            args=("--from", spec, ENTRY_COMMAND, *invocation.args),
        )

    if choice is RunnerChoice.PACKAGE_RUNNER_FALLBACK:
        spec = package_specifier(pypi_version)
        return LaunchPlan(
            choice=choice,
            command=choice.command,
            args=("x", "--from", spec, ENTRY_COMMAND, *invocation.args),
        )

    if choice is RunnerChoice.CONTAINER:
        container = build_container_spec(
            invocation,
            platform=platform if platform is not None else sys.platform,
            home=home,
        )
        return LaunchPlan(
            choice=choice,
            command=choice.command,
            args=tuple(container.to_args()),
            container=container,
        )

    raise NoRunnerAvailableError(tuple(c.command for c in RUNNER_PRECEDENCE))


def resolve_launch_plan(
    invocation: Invocation,
    probe: Callable[[str], bool] = probe_command,
    *,
    pypi_version: str | None = None,
) -> LaunchPlan:
    """
    Probe the system for runners and plan the launch.

    Args:
        invocation: Caller arguments and environment snapshot
        probe: Command probe, injectable for tests
        pypi_version: Pinned mcp-atlassian version for uvx/uv

    Raises:
        NoRunnerAvailableError: If no runner is available
    """
    capabilities = probe_capabilities(probe)
    plan = plan_launch(capabilities, invocation, pypi_version=pypi_version)
    logger.debug(f"Selected runner {plan.choice.value}: {plan.argv}")
    if plan.container is not None:
        logger.debug(
            f"Container env: {plan.container.env_keys or 'none'}, "
            f"port: {plan.container.port or 'image default'}, "
            f"token cache: {plan.container.volume or 'not mounted'}"
        )
    return plan


__all__ = [
    "PACKAGE_NAME",
    "package_specifier",
    "choose_runner",
    "plan_launch",
    "resolve_launch_plan",
]
