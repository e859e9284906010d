"""
Environment projection for the Docker runner.

Only variables on a fixed whitelist are forwarded into the container, and
only by name: Docker resolves each ``-e KEY`` against the launcher's own
environment, so secret values never appear on the command line.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from mcp_atlassian_launcher.core.launch.argv import find_arg_value, has_flag
from mcp_atlassian_launcher.core.launch.models import ContainerInvocationSpec, Invocation

logger = logging.getLogger(__name__)

DOCKER_IMAGE = "ghcr.io/sooperset/mcp-atlassian:latest"

# OAuth token cache, persisted across container runs via a bind mount
TOKEN_CACHE_DIRNAME = ".mcp-atlassian"
CONTAINER_TOKEN_CACHE = "/home/app/.mcp-atlassian"

# Platforms where the token cache is not bind-mounted
NO_MOUNT_PLATFORMS = frozenset({"win32"})

PORT_FLAG = "--port"
OAUTH_SETUP_FLAG = "--oauth-setup"

_DIGITS = re.compile(r"[0-9]+")

# Variables forwarded into the container, grouped by concern.
ENV_PASS_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "core",
        (
            "ENABLED_TOOLS",
            "READ_ONLY_MODE",
            "MCP_VERBOSE",
            "MCP_LOGGING_STDOUT",
        ),
    ),
    (
        "confluence",
        (
            "CONFLUENCE_URL",
            "CONFLUENCE_USERNAME",
            "CONFLUENCE_API_TOKEN",
            "CONFLUENCE_PERSONAL_TOKEN",
            "CONFLUENCE_SSL_VERIFY",
            "CONFLUENCE_SPACES_FILTER",
            "CONFLUENCE_CUSTOM_HEADERS",
        ),
    ),
    (
        "jira",
        (
            "JIRA_URL",
            "JIRA_USERNAME",
            "JIRA_API_TOKEN",
            "JIRA_PERSONAL_TOKEN",
            "JIRA_SSL_VERIFY",
            "JIRA_PROJECTS_FILTER",
            "JIRA_CUSTOM_HEADERS",
        ),
    ),
    (
        "oauth",
        (
            "ATLASSIAN_OAUTH_CLIENT_ID",
            "ATLASSIAN_OAUTH_CLIENT_SECRET",
            "ATLASSIAN_OAUTH_REDIRECT_URI",
            "ATLASSIAN_OAUTH_SCOPE",
            "ATLASSIAN_OAUTH_CLOUD_ID",
            "ATLASSIAN_OAUTH_ACCESS_TOKEN",
        ),
    ),
    (
        "transport",
        (
            "TRANSPORT",
            "PORT",
            "HOST",
            "STREAMABLE_HTTP_PATH",
        ),
    ),
    (
        "proxy",
        (
            "HTTP_PROXY",
            "HTTPS_PROXY",
            "NO_PROXY",
            "SOCKS_PROXY",
            "JIRA_HTTP_PROXY",
            "JIRA_HTTPS_PROXY",
            "JIRA_NO_PROXY",
            "CONFLUENCE_HTTP_PROXY",
            "CONFLUENCE_HTTPS_PROXY",
            "CONFLUENCE_NO_PROXY",
        ),
    ),
)

ENV_PASS_LIST: tuple[str, ...] = tuple(name for _, names in ENV_PASS_GROUPS for name in names)


def present_env_keys(environ: Mapping[str, str]) -> list[str]:
    """
    Whitelisted variable names that are set in ``environ``.

    A variable set to an empty string still counts as set. Order follows
    ENV_PASS_LIST.
    """
    return [name for name in ENV_PASS_LIST if name in environ]


def resolve_port(environ: Mapping[str, str], args: Sequence[str]) -> str | None:
    """
    Port to publish from the container.

    ``PORT`` wins over a ``--port`` argument; an empty ``PORT`` falls back to
    the argument. Anything other than plain decimal digits is ignored.

    Returns:
        The port as a string, or None when no usable port was given
    """
    port = environ.get("PORT") or find_arg_value(args, PORT_FLAG)
    if port and _DIGITS.fullmatch(port):
        return port
    if port:
        logger.debug(f"Ignoring non-numeric port {port!r}")
    return None


def oauth_volume(
    args: Sequence[str],
    *,
    platform: str,
    home: Path | None = None,
) -> str | None:
    """
    Bind mount for the OAuth token cache, when ``--oauth-setup`` is requested.

    Skipped on Windows, where tokens then only live as long as the container.
    The home directory is only looked up once a mount is actually needed.
    """
    if not has_flag(args, OAUTH_SETUP_FLAG):
        return None
    if platform in NO_MOUNT_PLATFORMS:
        logger.debug(f"Skipping token cache mount on {platform}")
        return None
    if home is None:
        home = Path.home()
    host_dir = home / TOKEN_CACHE_DIRNAME
    return f"{host_dir}:{CONTAINER_TOKEN_CACHE}"


def build_container_spec(
    invocation: Invocation,
    *,
    platform: str,
    home: Path | None = None,
) -> ContainerInvocationSpec:
    """
    Build the Docker invocation for ``invocation``.

    Args:
        invocation: Caller arguments and environment snapshot
        platform: Host platform, as reported by ``sys.platform``
        home: User home directory, parent of the token cache (default: Path.home())

    Returns:
        ContainerInvocationSpec with env names, port, mount and passthrough args
    """
    return ContainerInvocationSpec(
        image=DOCKER_IMAGE,
        env_keys=present_env_keys(invocation.environ),
        port=resolve_port(invocation.environ, invocation.args),
        volume=oauth_volume(invocation.args, platform=platform, home=home),
        passthrough_args=list(invocation.args),
    )


__all__ = [
    "DOCKER_IMAGE",
    "CONTAINER_TOKEN_CACHE",
    "ENV_PASS_GROUPS",
    "ENV_PASS_LIST",
    "present_env_keys",
    "resolve_port",
    "oauth_volume",
    "build_container_spec",
]
