"""
Standardized error output and exit codes for the launcher CLI.

All output goes to stderr: stdout belongs to the mcp-atlassian server.
"""

from enum import IntEnum

from rich.console import Console

console = Console(stderr=True, highlight=False, soft_wrap=True)


class ExitCode(IntEnum):
    """Exit codes produced by the launcher itself."""

    SUCCESS = 0
    """Launched server exited cleanly (or exited without a code)."""

    GENERAL_ERROR = 1
    """No runner available, or the runner could not be started."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | list[str] | None = None,
    doc_url: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command(s) or action(s) to fix it
        doc_url: Optional documentation URL for more help

    Example:
        >>> print_error(
        ...     "No runner available",
        ...     reason="mcp-atlassian requires 'uvx' or 'docker'",
        ...     solution="curl -LsSf https://astral.sh/uv/install.sh | sh",
        ...     doc_url="https://docs.astral.sh/uv/getting-started/",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        solutions = [solution] if isinstance(solution, str) else solution
        first, *rest = solutions
        console.print(f"[cyan]→ Try:[/cyan] {first}")
        for item in rest:
            console.print(f"[cyan]→ Or:[/cyan] {item}")

    if doc_url:
        console.print(f"[dim]Docs: {doc_url}[/dim]")


def print_no_runner_error() -> None:
    """Print remediation when none of uvx, uv or docker is installed."""
    print_error(
        "mcp-atlassian requires either 'uvx' (recommended) or 'docker' to run.",
        reason="Neither uvx, uv nor docker was found in PATH",
        solution=[
            "curl -LsSf https://astral.sh/uv/install.sh | sh  # macOS/Linux",
            "irm https://astral.sh/uv/install.ps1 | iex  # Windows (PowerShell)",
            "install Docker: https://docs.docker.com/get-docker/",
        ],
        doc_url="https://docs.astral.sh/uv/getting-started/",
    )


__all__ = [
    "ExitCode",
    "console",
    "print_error",
    "print_no_runner_error",
]
