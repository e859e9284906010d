"""
mcp-atlassian launcher

Picks a runner (uvx, uv or Docker) for the mcp-atlassian server, launches it
as a child process and forwards its exit status.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
