"""
Read-only inspection of the caller's arguments.

The launcher peeks at a few flags (``--port``, ``--oauth-setup``) to shape a
container invocation, but never removes or rewrites them: every argument is
still passed through to the runner.
"""

from __future__ import annotations

from collections.abc import Sequence


def find_arg_value(args: Sequence[str], name: str) -> str | None:
    """
    Find the value of a ``--name value`` or ``--name=value`` argument.

    Scans left to right and returns the first match. A bare ``--name`` in the
    last position has no value and is skipped.

    Examples:
        >>> find_arg_value(["--port", "8080"], "--port")
        '8080'
        >>> find_arg_value(["--port=8080"], "--port")
        '8080'
        >>> find_arg_value(["--foo"], "--port") is None
        True
    """
    prefix = f"{name}="
    for i, arg in enumerate(args):
        if arg == name and i + 1 < len(args):
            return args[i + 1]
        if arg.startswith(prefix):
            return arg[len(prefix) :]
    return None


def has_flag(args: Sequence[str], name: str) -> bool:
    """Whether ``name`` appears as ``--name`` or ``--name=...``."""
    prefix = f"{name}="
    return any(arg == name or arg.startswith(prefix) for arg in args)


__all__ = ["find_arg_value", "has_flag"]
