"""Launcher settings, read from the environment."""

from mcp_atlassian_launcher.core.config.settings import LauncherSettings

__all__ = ["LauncherSettings"]
