"""
Launcher settings.

The launcher has no config file; everything comes from environment
variables, which are read once per run.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

DEBUG_VAR = "MCP_ATLASSIAN_LAUNCHER_DEBUG"
PYPI_VERSION_VAR = "MCP_ATLASSIAN_PYPI_VERSION"

_TRUTHY = {"1", "true", "yes", "on"}


class LauncherSettings(BaseModel):
    """Settings that influence the launcher itself (not the server)."""

    debug: bool = Field(
        default=False,
        description="Log runner selection and child outcome to stderr",
    )
    pypi_version: str | None = Field(
        default=None,
        description="Pinned mcp-atlassian version for uvx/uv",
    )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> LauncherSettings:
        """Build settings from an environment mapping."""
        return cls(
            debug=environ.get(DEBUG_VAR, "").strip().lower() in _TRUTHY,
            pypi_version=environ.get(PYPI_VERSION_VAR) or None,
        )


__all__ = ["LauncherSettings", "DEBUG_VAR", "PYPI_VERSION_VAR"]
