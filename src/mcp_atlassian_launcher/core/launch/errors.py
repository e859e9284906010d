"""
Exceptions raised by the launch package.
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base exception for launcher errors."""


class NoRunnerAvailableError(LauncherError):
    """None of uvx, uv or docker could be found."""

    def __init__(self, candidates: tuple[str, ...]) -> None:
        self.candidates = candidates
        super().__init__(f"No runner available (tried: {', '.join(candidates)})")


class SpawnError(LauncherError):
    """The selected runner could not be started."""

    def __init__(self, command: str, cause: OSError) -> None:
        self.command = command
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{command}: {reason}")


__all__ = [
    "LauncherError",
    "NoRunnerAvailableError",
    "SpawnError",
]
