"""
Pytest configuration and shared fixtures.

Provides invocation builders, fake probes and a fake home directory used
across the launcher test suite.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from mcp_atlassian_launcher.core.launch import Invocation


@pytest.fixture
def make_invocation() -> Callable[..., Invocation]:
    """Build an Invocation from args and an explicit environment."""

    def _make(args: list[str] | None = None, env: dict[str, str] | None = None) -> Invocation:
        return Invocation.capture(args or [], env or {})

    return _make


@pytest.fixture
def fake_probe() -> Callable[..., Callable[[str], bool]]:
    """
    Build a probe that reports the given tools as present.

    The returned probe records every command it was asked about in ``.calls``.
    """

    def _make(*present: str) -> Callable[[str], bool]:
        calls: list[str] = []

        def probe(command: str) -> bool:
            calls.append(command)
            return command in present

        probe.calls = calls  # type: ignore[attr-defined]
        return probe

    return _make


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Provide a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home
