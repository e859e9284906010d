"""
Launch service for runner detection and mcp-atlassian launching.

This package holds the whole launch path: probing for uvx, uv and docker,
choosing one in fixed precedence order, building its command line, and
supervising the resulting child process.

Modules:
    probe: Runner detection (``<tool> --version``)
    argv: Read-only inspection of caller arguments
    environment: Env whitelist, port and token-cache mount for Docker
    selector: Pure runner choice and launch planning
    supervisor: Spawn, wait, and forward exit code or signal
    models: Data models (Invocation, Capabilities, LaunchPlan, ...)

Example Usage:
    >>> import os, sys
    >>> from mcp_atlassian_launcher.core.launch import Invocation, resolve_launch_plan, run
    >>>
    >>> invocation = Invocation.capture(sys.argv[1:], os.environ)
    >>> plan = resolve_launch_plan(invocation)
    >>> run(plan.command, plan.args)  # Does not return
"""

from mcp_atlassian_launcher.core.launch.argv import find_arg_value, has_flag
from mcp_atlassian_launcher.core.launch.environment import (
    DOCKER_IMAGE,
    ENV_PASS_LIST,
    build_container_spec,
)
from mcp_atlassian_launcher.core.launch.errors import (
    LauncherError,
    NoRunnerAvailableError,
    SpawnError,
)
from mcp_atlassian_launcher.core.launch.models import (
    Capabilities,
    ChildOutcome,
    ContainerInvocationSpec,
    Invocation,
    LaunchPlan,
    RunnerChoice,
)
from mcp_atlassian_launcher.core.launch.probe import probe_capabilities, probe_command
from mcp_atlassian_launcher.core.launch.selector import plan_launch, resolve_launch_plan
from mcp_atlassian_launcher.core.launch.supervisor import forward_outcome, run

__all__ = [
    # Probe
    "probe_command",
    "probe_capabilities",
    # Arguments
    "find_arg_value",
    "has_flag",
    # Environment
    "DOCKER_IMAGE",
    "ENV_PASS_LIST",
    "build_container_spec",
    # Selector
    "plan_launch",
    "resolve_launch_plan",
    # Supervisor
    "run",
    "forward_outcome",
    # Errors
    "LauncherError",
    "NoRunnerAvailableError",
    "SpawnError",
    # Models
    "Capabilities",
    "ChildOutcome",
    "ContainerInvocationSpec",
    "Invocation",
    "LaunchPlan",
    "RunnerChoice",
]
